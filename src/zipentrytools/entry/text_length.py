from zipentrytools.entry.constants import MAX_BYTES_PER_CHAR

TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "surrogatepass"


def fast_upper_bound(text: str) -> int:
    return len(text) * MAX_BYTES_PER_CHAR


def utf8_length(text: str) -> int:
    """Count the bytes `encode_text` produces for `text` without encoding it."""
    length = 0

    for char in text:
        code_point = ord(char)

        if code_point < 0x80:
            length += 1
        elif code_point < 0x800:
            length += 2
        elif code_point < 0x10000:
            # Lone surrogates included, they are written with surrogatepass
            length += 3
        else:
            length += 4

    return length


def exceeds_length(text: str, limit: int) -> bool:
    if fast_upper_bound(text) <= limit:
        return False

    return utf8_length(text) > limit


def encode_text(text: str) -> bytes:
    return text.encode(TEXT_ENCODING, TEXT_ERRORS)


def decode_text(data: bytes) -> str:
    return data.decode(TEXT_ENCODING, TEXT_ERRORS)
