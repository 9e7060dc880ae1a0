from typing import Annotated

import typer
from rich import print

from zipentrytools.entry.constants import MAX_UINT32
from zipentrytools.entry.dostime import from_dos_time, to_dos_time, unpack_date_time
from zipentrytools.entry.enumerators.time_zone import TimeZoneChoice
from zipentrytools.entry.helpers import format_time, parse_int, parse_timestamp

app = typer.Typer(help="Tools for packed MS-DOS date/time values used by ZIP entries")

TimeZoneOption = Annotated[
    TimeZoneChoice,
    typer.Option(
        "--timezone",
        "-z",
        help="Calendar the packed value is interpreted in",
        case_sensitive=False,
    ),
]


@app.command(help="Packs a timestamp into a DOS date/time value")
def encode(
    timestamp: Annotated[
        str,
        typer.Argument(help="Timestamp (ISO 8601 or epoch milliseconds)"),
    ],
    timezone: TimeZoneOption = TimeZoneChoice.LOCAL,
):
    tz = timezone.tzinfo
    epoch_millis = parse_timestamp(timestamp, tz, "TIMESTAMP")
    packed = to_dos_time(epoch_millis, tz=tz)

    print(f"Packed: 0x{packed:08x} ({packed})")
    print(f"Date: 0x{packed >> 16:04x}, Time: 0x{packed & 0xFFFF:04x}")
    print(f"Stored as: {format_time(from_dos_time(packed, tz=tz), tz)}")


@app.command(help="Unpacks a DOS date/time value into a timestamp")
def decode(
    packed: Annotated[
        str,
        typer.Argument(help="Packed value (decimal or 0x-prefixed hex)"),
    ],
    timezone: TimeZoneOption = TimeZoneChoice.LOCAL,
):
    tz = timezone.tzinfo
    value = parse_int(packed, "PACKED")

    if value < 0 or value > MAX_UINT32:
        raise typer.BadParameter(
            f"{packed} does not fit in 32 bits", param_hint="PACKED"
        )

    year, month, day, hour, minute, second = unpack_date_time(value)
    epoch_millis = from_dos_time(value, tz=tz)

    print(
        f"Fields: {year:04d}-{month:02d}-{day:02d} "
        f"{hour:02d}:{minute:02d}:{second:02d}"
    )
    print(f"Epoch milliseconds: {epoch_millis}")
    print(f"Time: {format_time(epoch_millis, tz)}")


if __name__ == "__main__":
    app()
