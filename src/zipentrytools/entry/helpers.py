from contextlib import contextmanager
from datetime import datetime, timedelta, timezone, tzinfo

import typer

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@contextmanager
def invalid_value(param_hint: str):
    # Report record validation errors as CLI usage errors
    try:
        yield
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint=param_hint) from e


def parse_int(value: str, param_hint: str) -> int:
    try:
        return int(value, 0)
    except ValueError:
        raise typer.BadParameter(
            f"'{value}' is not a decimal or 0x-prefixed hex number",
            param_hint=param_hint,
        ) from None


def parse_hex_bytes(value: str, param_hint: str) -> bytes:
    try:
        return bytes.fromhex(value)
    except ValueError:
        raise typer.BadParameter(
            f"'{value}' is not a hex string", param_hint=param_hint
        ) from None


def parse_timestamp(value: str, tz: tzinfo | None, param_hint: str) -> int:
    digits = value.removeprefix("-")

    if digits.isascii() and digits.isdigit():
        return int(value)

    try:
        dt = datetime.fromisoformat(value)
    except ValueError:
        raise typer.BadParameter(
            f"'{value}' is neither epoch milliseconds nor an ISO 8601 timestamp",
            param_hint=param_hint,
        ) from None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=tz) if tz is not None else dt.astimezone()

    return (dt - EPOCH) // timedelta(milliseconds=1)


def format_time(epoch_millis: int, tz: tzinfo | None) -> str:
    return datetime.fromtimestamp(epoch_millis // 1000, tz=tz).isoformat(sep=" ")
