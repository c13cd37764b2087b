#!filepath: wallclock/core/formatting.py
from __future__ import annotations

from typing import List, Optional, Tuple

from wallclock.core.oracle import OffsetOracle
from wallclock.core.types import Instant, WallTime

MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


class Formatter:
    """Display strings for instants, all rendered through the offset oracle."""

    def __init__(self, oracle: OffsetOracle):
        self.oracle = oracle

    def format_time(self, instant: Instant, zone: str, hour12: bool = False) -> str:
        """"17:05" 或 "5:05 PM"."""
        parts = self.oracle.format_parts(instant, zone, fields=("hour", "minute"), hour12=hour12)
        if hour12:
            return f"{parts['hour']}:{parts['minute']} {parts['dayPeriod']}"
        return f"{_hour24(parts['hour'])}:{parts['minute']}"

    def format_clock(self, instant: Instant, zone: str, hour12: bool = False) -> Tuple[str, Optional[str]]:
        """
        带秒的大号时钟读数，dayPeriod 单独返回（显示层会把它排得更小）。
        """
        parts = self.oracle.format_parts(instant, zone, fields=("hour", "minute", "second"), hour12=hour12)
        hour = parts["hour"] if hour12 else _hour24(parts["hour"])
        return f"{hour}:{parts['minute']}:{parts['second']}", parts.get("dayPeriod")

    def format_date(self, instant: Instant, zone: str) -> str:
        """Full date style: "Monday, July 15, 2024"."""
        parts = self.oracle.format_parts(instant, zone, fields=("year", "month", "day", "weekday"))
        month = MONTHS[int(parts["month"]) - 1]
        return f"{parts['weekday']}, {month} {int(parts['day'])}, {parts['year']}"

    def time_input_value(self, instant: Instant, zone: str) -> str:
        parts = self.oracle.format_parts(instant, zone, fields=("hour", "minute"))
        return f"{_hour24(parts['hour'])}:{int(parts['minute']):02d}"


def _hour24(raw: str) -> str:
    # 某些实现会把午夜渲染为 "24"
    h = int(raw)
    return "00" if h == 24 else f"{h:02d}"


def time_options(step_minutes: int = 15, current: Optional[str] = None) -> List[str]:
    """
    一天内按 step_minutes 间隔的 HH:mm 列表；
    current 不在网格上时补进去并重新排序。
    """
    if step_minutes <= 0:
        raise ValueError(f"step_minutes must be positive: {step_minutes}")

    options = [str(WallTime(m // 60, m % 60)) for m in range(0, 24 * 60, step_minutes)]

    if current is not None:
        current = str(WallTime.parse(current))
        if current not in options:
            options.append(current)
            options.sort()

    return options
