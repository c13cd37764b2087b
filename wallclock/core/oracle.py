#!filepath: wallclock/core/oracle.py
from __future__ import annotations

import os
from datetime import datetime, tzinfo
from functools import lru_cache
from typing import Dict, FrozenSet, Optional, Protocol, Sequence
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError, available_timezones

from wallclock.core.types import Instant, LocalFields, LOCAL_ZONE
from wallclock.utils.errors import InvalidZoneError

SUPPORTED_FIELDS = ("year", "month", "day", "hour", "minute", "second", "weekday")
DEFAULT_FIELDS = ("year", "month", "day", "hour", "minute", "second")

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


class OffsetOracle(Protocol):
    """
    Offset Oracle Contract

    唯一职责：
      - 给出 instant 在某个时区下的钟面读数（含 DST 规则）
    """

    def format_parts(
        self,
        instant: Instant,
        zone: str,
        fields: Sequence[str] = DEFAULT_FIELDS,
        hour12: bool = False,
    ) -> Dict[str, str]:
        """
        Returns
        -------
        Dict[str, str]
            field name → string value；hour12=True 时额外包含 dayPeriod ("AM"/"PM")

        Raises
        ------
        InvalidZoneError
            zone 不是合法的时区标识
        """
        ...

    def list_supported_zones(self) -> FrozenSet[str]:
        ...


@lru_cache(maxsize=None)
def _zone_info(zone: str) -> ZoneInfo:
    try:
        return ZoneInfo(zone)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise InvalidZoneError(zone) from e


def local_zone_name() -> str:
    """观察者环境时区的显示名：优先 TZ 环境变量，否则取本地时区缩写。"""
    tz_env = os.getenv("TZ")
    if tz_env:
        return tz_env.lstrip(":")
    return datetime.now().astimezone().tzname() or "UTC"


class ZoneInfoOracle:
    """OffsetOracle backed by the IANA database shipped with zoneinfo/tzdata."""

    def resolve_tz(self, zone: str) -> Optional[tzinfo]:
        if not isinstance(zone, str) or not zone:
            raise InvalidZoneError(str(zone))
        if zone == LOCAL_ZONE:
            return None
        return _zone_info(zone)

    def localize(self, instant: Instant, zone: str) -> datetime:
        tz = self.resolve_tz(zone)
        # tz=None → 进程本地时区
        return instant.to_datetime().astimezone(tz)

    def format_parts(
        self,
        instant: Instant,
        zone: str,
        fields: Sequence[str] = DEFAULT_FIELDS,
        hour12: bool = False,
    ) -> Dict[str, str]:
        unknown = [f for f in fields if f not in SUPPORTED_FIELDS]
        if unknown:
            raise ValueError(f"Unsupported fields: {unknown}")

        local = self.localize(instant, zone)
        parts: Dict[str, str] = {}

        for name in fields:
            if name == "year":
                parts[name] = str(local.year)
            elif name == "month":
                parts[name] = str(local.month)
            elif name == "day":
                parts[name] = str(local.day)
            elif name == "hour":
                if hour12:
                    parts[name] = str(local.hour % 12 or 12)
                else:
                    parts[name] = f"{local.hour:02d}"
            elif name == "minute":
                parts[name] = f"{local.minute:02d}"
            elif name == "second":
                parts[name] = f"{local.second:02d}"
            elif name == "weekday":
                parts[name] = WEEKDAYS[local.weekday()]

        if hour12 and "hour" in fields:
            parts["dayPeriod"] = "AM" if local.hour < 12 else "PM"

        return parts

    def list_supported_zones(self) -> FrozenSet[str]:
        return frozenset(available_timezones())


def read_fields(parts: Dict[str, str]) -> LocalFields:
    """把 24 小时制 format_parts 结果解析为 LocalFields；hour 为 "24" 时按 0 处理。"""
    hour = int(parts.get("hour", "0"))
    return LocalFields(
        year=int(parts.get("year", "1970")),
        month=int(parts.get("month", "1")),
        day=int(parts.get("day", "1")),
        hour=0 if hour == 24 else hour,
        minute=int(parts.get("minute", "0")),
        second=int(parts.get("second", "0")),
        weekday=parts.get("weekday", ""),
    )
