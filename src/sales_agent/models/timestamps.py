"""
Timestamp convention shared by all records.

Timestamps are naive local time, matching `datetime.now(tz=None)` defaults.
Aware input (e.g. ISO strings ending in `Z` from an import) is converted to
local time and stripped of its offset, so any two record timestamps compare.
"""

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator


def to_local_naive(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(None).replace(tzinfo=None)


def local_now() -> datetime:
    return datetime.now(tz=None)


LocalTimestamp = Annotated[datetime, AfterValidator(to_local_naive)]
