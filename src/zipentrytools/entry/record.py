import zipfile
from datetime import tzinfo

from zipentrytools.entry.constants import MAX_FIELD_LENGTH, MAX_UINT32, UTF8_FLAG
from zipentrytools.entry.dostime import (
    from_dos_time,
    pack_date_time,
    to_dos_time,
    unpack_date_time,
)
from zipentrytools.entry.enumerators.compression_method import CompressionMethod
from zipentrytools.entry.text_length import decode_text, encode_text, exceeds_length


def _check_uint32(value: int, field: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(
            f"entry {field} must be an integer, not {type(value).__name__}"
        )

    if value < 0 or value > MAX_UINT32:
        raise ValueError(f"invalid entry {field}")

    return value


def _decode_comment(data: bytes) -> str:
    # The UTF-8 flag does not survive every writer, so detect it from the bytes
    try:
        return decode_text(data)
    except UnicodeDecodeError:
        return data.decode("cp437")


class EntryRecord:
    """Metadata of a single ZIP archive entry.

    Every optional field starts as ``None`` (unknown), which is distinct from
    zero. Values are range-checked by the setters only; records created through
    ``copy_from`` or ``from_zipinfo`` are trusted as they are.

    Two records are equal only when they are the same object, the hash is
    derived from the name alone.
    """

    def __init__(self, name: str):
        if name is None:
            raise ValueError("entry name is required")

        if exceeds_length(name, MAX_FIELD_LENGTH):
            raise ValueError("entry name too long")

        self.__name = name

        self.__dos_time: int | None = None
        self.__crc: int | None = None
        self.__size: int | None = None
        self.__compressed_size: int | None = None
        self.__method: CompressionMethod | None = None
        self.__extra: bytearray | None = None
        self.__comment: str | None = None

    @classmethod
    def copy_from(cls, other: "EntryRecord") -> "EntryRecord":
        record = cls.__new__(cls)

        record.__name = other.__name
        record.__dos_time = other.__dos_time
        record.__crc = other.__crc
        record.__size = other.__size
        record.__compressed_size = other.__compressed_size
        record.__method = other.__method
        record.__extra = None if other.__extra is None else bytearray(other.__extra)
        record.__comment = other.__comment

        return record

    @classmethod
    def from_zipinfo(cls, info: zipfile.ZipInfo) -> "EntryRecord":
        try:
            method = CompressionMethod(info.compress_type)
        except ValueError:
            raise ValueError(
                f"invalid compression method: {info.compress_type}"
            ) from None

        record = cls.__new__(cls)

        record.__name = info.filename
        record.__dos_time = pack_date_time(info.date_time)
        # ZipInfo only gets a CRC once it is written or read from an archive
        record.__crc = getattr(info, "CRC", None)
        record.__size = info.file_size
        record.__compressed_size = info.compress_size
        record.__method = method
        record.__extra = bytearray(info.extra) if info.extra else None
        record.__comment = _decode_comment(info.comment) if info.comment else None

        return record

    def to_zipinfo(self) -> zipfile.ZipInfo:
        info = zipfile.ZipInfo(self.__name)

        if self.__dos_time is not None:
            info.date_time = unpack_date_time(self.__dos_time)

        if self.__method is not None:
            info.compress_type = int(self.__method)

        if self.__crc is not None:
            info.CRC = self.__crc

        if self.__size is not None:
            info.file_size = self.__size

        if self.__compressed_size is not None:
            info.compress_size = self.__compressed_size

        if self.__extra is not None:
            info.extra = bytes(self.__extra)

        if self.__comment is not None:
            info.comment = encode_text(self.__comment)

        # Only a hint, zipfile resets the flags and re-flags non-ASCII names only
        if not self.__name.isascii() or not (self.__comment or "").isascii():
            info.flag_bits |= UTF8_FLAG

        return info

    @property
    def name(self) -> str:
        return self.__name

    @property
    def is_directory(self) -> bool:
        return self.__name.endswith("/")

    @property
    def dos_time(self) -> int | None:
        return self.__dos_time

    @property
    def time(self) -> int | None:
        return self.get_time()

    @time.setter
    def time(self, epoch_millis: int | None):
        self.set_time(epoch_millis)

    def get_time(self, tz: tzinfo | None = None) -> int | None:
        if self.__dos_time is None:
            return None

        return from_dos_time(self.__dos_time, tz=tz)

    def set_time(self, epoch_millis: int | None, tz: tzinfo | None = None):
        self.__dos_time = (
            None if epoch_millis is None else to_dos_time(epoch_millis, tz=tz)
        )

    @property
    def crc(self) -> int | None:
        return self.__crc

    @crc.setter
    def crc(self, value: int | None):
        self.__crc = None if value is None else _check_uint32(value, "crc-32")

    @property
    def size(self) -> int | None:
        return self.__size

    @size.setter
    def size(self, value: int | None):
        self.__size = None if value is None else _check_uint32(value, "size")

    @property
    def compressed_size(self) -> int | None:
        return self.__compressed_size

    @compressed_size.setter
    def compressed_size(self, value: int | None):
        self.__compressed_size = (
            None if value is None else _check_uint32(value, "compressed size")
        )

    @property
    def method(self) -> CompressionMethod | None:
        return self.__method

    @method.setter
    def method(self, value: int | None):
        if value is None:
            self.__method = None
            return

        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError("invalid compression method")

        try:
            self.__method = CompressionMethod(value)
        except ValueError:
            raise ValueError("invalid compression method") from None

    @property
    def extra(self) -> bytearray | None:
        return self.__extra

    @extra.setter
    def extra(self, value: bytes | bytearray | memoryview | None):
        if value is None:
            self.__extra = None
            return

        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"entry extra must be bytes-like, not {type(value).__name__}"
            )

        data = bytearray(value)

        if len(data) > MAX_FIELD_LENGTH:
            raise ValueError("invalid extra field length")

        self.__extra = data

    @property
    def comment(self) -> str | None:
        return self.__comment

    @comment.setter
    def comment(self, value: str | None):
        if value is not None and not isinstance(value, str):
            raise TypeError(
                f"entry comment must be a string, not {type(value).__name__}"
            )

        if value is not None and exceeds_length(value, MAX_FIELD_LENGTH):
            raise ValueError("invalid entry comment length")

        self.__comment = value

    def __copy__(self) -> "EntryRecord":
        return type(self).copy_from(self)

    def __hash__(self) -> int:
        return hash(self.__name)

    def __str__(self) -> str:
        return self.__name

    def __repr__(self) -> str:
        fields = [f"name={self.__name!r}"]

        for field, value in (
            ("dos_time", self.__dos_time),
            ("crc", self.__crc),
            ("size", self.__size),
            ("compressed_size", self.__compressed_size),
            ("method", self.__method),
            ("comment", self.__comment),
        ):
            if value is not None:
                fields.append(f"{field}={value!r}")

        if self.__extra is not None:
            fields.append(f"extra=<{len(self.__extra)} bytes>")

        return f"EntryRecord({', '.join(fields)})"
