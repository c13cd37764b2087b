#!filepath: wallclock/core/types.py
from __future__ import annotations

import re
import time as _time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from wallclock.utils.errors import WallTimeError

# 观察者所在环境的默认时区（伪时区）
LOCAL_ZONE = "local"

_HHMM = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


# ================================================================
# Instant：绝对时间点（epoch 毫秒）
# ================================================================
@dataclass(frozen=True, order=True)
class Instant:
    epoch_ms: int

    @classmethod
    def now(cls) -> "Instant":
        return cls(_time.time_ns() // 1_000_000)

    @classmethod
    def from_datetime(cls, dt_: datetime) -> "Instant":
        if dt_.tzinfo is None:
            raise ValueError("Instant.from_datetime requires an aware datetime")
        return cls((dt_ - _EPOCH) // _ONE_MS)

    @classmethod
    def from_utc_fields(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
    ) -> "Instant":
        return cls.from_datetime(datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc))

    def to_datetime(self) -> datetime:
        """Aware datetime in UTC."""
        return _EPOCH + timedelta(milliseconds=self.epoch_ms)

    def shift_minutes(self, minutes: int) -> "Instant":
        return Instant(self.epoch_ms + minutes * 60_000)

    def shift_seconds(self, seconds: int) -> "Instant":
        return Instant(self.epoch_ms + seconds * 1000)

    def __str__(self) -> str:
        return self.to_datetime().isoformat(timespec="milliseconds").replace("+00:00", "Z")


# ================================================================
# WallTime：不带日期、不带时区的钟面时间 HH:mm
# ================================================================
@dataclass(frozen=True)
class WallTime:
    """
    hour ∈ [0, 24]，minute ∈ [0, 59]。

    hour == 24 在构造时归一化为 0（部分调用方用 24:00 表示午夜）。
    其余越界值直接拒绝（WallTimeError），不做 clamp。
    """

    hour: int
    minute: int

    def __post_init__(self):
        if not isinstance(self.hour, int) or not isinstance(self.minute, int):
            raise WallTimeError(f"WallTime fields must be int: {self.hour!r}:{self.minute!r}")
        if not 0 <= self.hour <= 24:
            raise WallTimeError(f"hour out of range [0, 24]: {self.hour}")
        if not 0 <= self.minute <= 59:
            raise WallTimeError(f"minute out of range [0, 59]: {self.minute}")
        if self.hour == 24:
            object.__setattr__(self, "hour", 0)

    @classmethod
    def parse(cls, text: str) -> "WallTime":
        m = _HHMM.match(text or "")
        if not m:
            raise WallTimeError(f"Expected HH:mm, got {text!r}")
        return cls(int(m.group(1)), int(m.group(2)))

    @property
    def minutes_of_day(self) -> int:
        return self.hour * 60 + self.minute

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


# ================================================================
# 某个时区下的完整钟面读数
# ================================================================
@dataclass(frozen=True)
class LocalFields:
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    weekday: str

    @property
    def wall_time(self) -> WallTime:
        return WallTime(self.hour, self.minute)

    def naive_epoch_seconds(self) -> int:
        """把读数当作 UTC 解释得到的秒数；与真实 instant 之差即 UTC 偏移。"""
        return int(
            datetime(self.year, self.month, self.day, self.hour, self.minute, self.second,
                     tzinfo=timezone.utc).timestamp()
        )


@dataclass(frozen=True)
class ResolvedMoment:
    instant: Instant
    iterations: int          # oracle correction queries actually performed
    converged: bool          # an exact match was observed within max_iterations
    tie_broken: bool = False  # ambiguity policy swapped to the other occurrence
