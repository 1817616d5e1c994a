# lockedin/core/records.py
"""
Immutable snapshots of persisted log rows.

The engine accepts either these records or the plain row dicts produced by
the models' ``to_dict()`` (keys ``steps``, ``current_page``, ``stretched``,
``lifted``, ``learned``, ``did_3_mile``); rows are coerced on the way in and
never mutated.
"""
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union


@dataclass(frozen=True)
class DailyLogRecord:
    steps: Optional[int] = None
    current_page: Optional[int] = None
    stretched: Optional[bool] = None
    lifted: Optional[bool] = None
    learned: Optional[str] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "DailyLogRecord":
        return cls(
            steps=row.get("steps"),
            current_page=row.get("current_page"),
            stretched=row.get("stretched"),
            lifted=row.get("lifted"),
            learned=row.get("learned"),
        )

    @property
    def has_data(self) -> bool:
        """True when at least one scored field was logged."""
        return any(
            v is not None
            for v in (self.steps, self.current_page, self.stretched, self.lifted)
        )


@dataclass(frozen=True)
class WeeklyLogRecord:
    did_3_mile: Optional[bool] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "WeeklyLogRecord":
        return cls(did_3_mile=row.get("did_3_mile"))


DailyLike = Union[DailyLogRecord, Mapping[str, Any], None]
WeeklyLike = Union[WeeklyLogRecord, Mapping[str, Any], None]


def as_daily(record: DailyLike) -> DailyLogRecord:
    if record is None:
        return DailyLogRecord()
    if isinstance(record, DailyLogRecord):
        return record
    if isinstance(record, Mapping):
        return DailyLogRecord.from_row(record)
    raise ValueError(f"unsupported daily record: {record!r}")


def as_weekly(record: WeeklyLike) -> WeeklyLogRecord:
    if record is None:
        return WeeklyLogRecord()
    if isinstance(record, WeeklyLogRecord):
        return record
    if isinstance(record, Mapping):
        return WeeklyLogRecord.from_row(record)
    raise ValueError(f"unsupported weekly record: {record!r}")
