from typing import Annotated

import humanize
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from zipentrytools.entry.enumerators.compression_method import (
    CompressionMethod,
    CompressionMethodChoice,
)
from zipentrytools.entry.enumerators.time_zone import TimeZoneChoice
from zipentrytools.entry.helpers import (
    format_time,
    invalid_value,
    parse_hex_bytes,
    parse_int,
    parse_timestamp,
)
from zipentrytools.entry.record import EntryRecord

app = typer.Typer(help="Tools for ZIP entry records (per-entry metadata)")

UNKNOWN = "[dim]unknown[/dim]"


def _format_size(size: int | None) -> str:
    if size is None:
        return UNKNOWN

    return f"{humanize.naturalsize(size, binary=True)} ({size} bytes)"


@app.command(help="Builds an entry record from the given fields and prints it")
def info(
    name: Annotated[
        str,
        typer.Argument(help="Name of the entry, directories end with '/'"),
    ],
    time: Annotated[
        str | None,
        typer.Option(
            "--time",
            "-t",
            help="Modification time (ISO 8601 or epoch milliseconds)",
        ),
    ] = None,
    size: Annotated[
        str | None,
        typer.Option("--size", "-s", help="Uncompressed size in bytes"),
    ] = None,
    compressed_size: Annotated[
        str | None,
        typer.Option("--compressed-size", "-c", help="Compressed size in bytes"),
    ] = None,
    crc: Annotated[
        str | None,
        typer.Option("--crc", help="CRC-32 of the uncompressed data"),
    ] = None,
    method: Annotated[
        CompressionMethodChoice | None,
        typer.Option(
            "--method",
            "-m",
            help="Compression method of the entry",
            case_sensitive=False,
        ),
    ] = None,
    extra: Annotated[
        str | None,
        typer.Option("--extra", "-e", help="Extra field data as a hex string"),
    ] = None,
    comment: Annotated[
        str | None,
        typer.Option("--comment", help="Entry comment"),
    ] = None,
    timezone: Annotated[
        TimeZoneChoice,
        typer.Option(
            "--timezone",
            "-z",
            help="Calendar used for the modification time",
            case_sensitive=False,
        ),
    ] = TimeZoneChoice.LOCAL,
):
    tz = timezone.tzinfo

    with invalid_value("NAME"):
        record = EntryRecord(name)

    if time is not None:
        record.set_time(parse_timestamp(time, tz, "--time"), tz=tz)

    with invalid_value("--size"):
        record.size = None if size is None else parse_int(size, "--size")

    with invalid_value("--compressed-size"):
        record.compressed_size = (
            None
            if compressed_size is None
            else parse_int(compressed_size, "--compressed-size")
        )

    with invalid_value("--crc"):
        record.crc = None if crc is None else parse_int(crc, "--crc")

    if method is not None:
        record.method = CompressionMethod[method.name]

    with invalid_value("--extra"):
        record.extra = None if extra is None else parse_hex_bytes(extra, "--extra")

    with invalid_value("--comment"):
        record.comment = comment

    modified = UNKNOWN

    if record.dos_time is not None:
        modified = format_time(record.get_time(tz=tz), tz)
        modified += f" (0x{record.dos_time:08x})"

    table = Table("Field", "Value", title=escape(str(record)))

    table.add_row("Directory", "yes" if record.is_directory else "no")
    table.add_row("Modified", modified)
    table.add_row("Size", _format_size(record.size))
    table.add_row("Compressed size", _format_size(record.compressed_size))
    table.add_row("CRC-32", UNKNOWN if record.crc is None else f"0x{record.crc:08x}")
    table.add_row(
        "Method",
        UNKNOWN
        if record.method is None
        else f"{record.method.name.title()} ({int(record.method)})",
    )
    table.add_row(
        "Extra",
        "-" if record.extra is None else f"{len(record.extra)} bytes",
    )
    table.add_row("Comment", "-" if record.comment is None else escape(record.comment))

    Console().print(table)


if __name__ == "__main__":
    app()
