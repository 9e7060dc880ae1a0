from enum import Enum, IntEnum


class CompressionMethod(IntEnum):
    STORED = 0
    DEFLATED = 8


class CompressionMethodChoice(str, Enum):
    STORED = "stored"
    DEFLATED = "deflated"
