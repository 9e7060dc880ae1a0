from datetime import timezone, tzinfo
from enum import Enum


class TimeZoneChoice(str, Enum):
    LOCAL = "local"
    UTC = "utc"

    @property
    def tzinfo(self) -> tzinfo | None:
        return timezone.utc if self is TimeZoneChoice.UTC else None
