# wallclock/session/clock_session.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from wallclock.core.formatting import Formatter
from wallclock.core.resolver import WallTimeResolver
from wallclock.core.types import Instant, LOCAL_ZONE, WallTime
from wallclock.utils.logger import logs


@dataclass
class ClockSession:
    """
    "When it is HH:mm in <source_zone>, my local time is ..." 视图的状态。

    状态转移：
      - LIVE   : tick(now) 持续把 instant 刷成当前时间
      - PAUSED : 用户选了具体时间；切换时区时保持钟面读数不变
    instant 由 session 持有，resolver 只做纯计算。
    """

    resolver: WallTimeResolver
    source_zone: str
    instant: Instant
    is_live: bool = True
    hour12: bool = False
    formatter: Formatter = field(init=False)

    def __post_init__(self):
        self.formatter = Formatter(self.resolver.oracle)

    def tick(self, now: Instant) -> None:
        if self.is_live:
            self.instant = now

    def select_time(self, text: str) -> Instant:
        wall = WallTime.parse(text)
        self.is_live = False
        self.instant = self.resolver.resolve(wall, self.source_zone, self.instant)
        logs.debug(f"[ClockSession] selected {text} in {self.source_zone} -> {self.instant}")
        return self.instant

    def change_zone(self, new_zone: str, now: Optional[Instant] = None) -> Instant:
        old_zone = self.source_zone
        if self.is_live:
            self.source_zone = new_zone
            self.instant = now or Instant.now()
        else:
            self.instant = self.resolver.shift_zone_preserving_wall_time(self.instant, old_zone, new_zone)
            self.source_zone = new_zone
        return self.instant

    def toggle_live(self) -> bool:
        self.is_live = not self.is_live
        return self.is_live

    def set_hour12(self, flag: bool) -> None:
        self.hour12 = flag

    def reset(self, now: Optional[Instant] = None) -> None:
        self.is_live = True
        self.instant = now or Instant.now()

    # ------------------------------------------------------------
    # 显示
    # ------------------------------------------------------------
    def source_time_value(self) -> str:
        return self.formatter.time_input_value(self.instant, self.source_zone)

    def local_display(self, observer_zone: str = LOCAL_ZONE) -> Tuple[str, Optional[str], str]:
        """(时钟读数, AM/PM 或 None, 完整日期)，按观察者时区渲染。"""
        clock, period = self.formatter.format_clock(self.instant, observer_zone, hour12=self.hour12)
        return clock, period, self.formatter.format_date(self.instant, observer_zone)
