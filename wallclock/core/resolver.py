#!filepath: wallclock/core/resolver.py
from __future__ import annotations

from typing import Optional

from wallclock.config.resolver_config import AmbiguityPolicy, ResolverConfig
from wallclock.core.oracle import DEFAULT_FIELDS, OffsetOracle, read_fields
from wallclock.core.types import Instant, LocalFields, ResolvedMoment, WallTime
from wallclock.utils.logger import logs

MINUTES_PER_DAY = 1440
HALF_DAY = 720

# DST 切换幅度历史上不超过 2 小时，探测窗口取 3 小时
AMBIGUITY_PROBE_MINUTES = 180


class WallTimeResolver:
    """
    钟面时间 ↔ 绝对时间 的换算核心。

    resolve() 是 oracle 渲染函数的 best-effort 右逆：
      - 先用 observer_zone 下 reference 所在的日历日期构造初始猜测
      - 再做至多 max_iterations 次定点修正（按钟面误差平移 instant）
      - 预算用尽仍未命中（DST 跳过的时间）时静默返回最后一次结果

    zone 的合法性完全由 oracle 负责，这里不做校验，异常原样向上抛。
    """

    def __init__(self, oracle: OffsetOracle, config: Optional[ResolverConfig] = None):
        self.oracle = oracle
        self.config = config or ResolverConfig()

    # ------------------------------------------------------------
    # render
    # ------------------------------------------------------------
    def render_fields(self, instant: Instant, zone: str) -> LocalFields:
        parts = self.oracle.format_parts(instant, zone, fields=DEFAULT_FIELDS + ("weekday",))
        return read_fields(parts)

    def render(self, instant: Instant, zone: str) -> WallTime:
        parts = self.oracle.format_parts(instant, zone, fields=("hour", "minute"))
        return read_fields(parts).wall_time

    # ------------------------------------------------------------
    # resolve
    # ------------------------------------------------------------
    def resolve(self, target: WallTime, zone: str, reference: Instant) -> Instant:
        return self.resolve_detailed(target, zone, reference).instant

    def resolve_detailed(self, target: WallTime, zone: str, reference: Instant) -> ResolvedMoment:
        d = self._seed(target, reference)
        fields: Optional[LocalFields] = None
        iterations = 0
        converged = False

        for _ in range(self.config.max_iterations):
            fields = read_fields(self.oracle.format_parts(d, zone, fields=DEFAULT_FIELDS))
            iterations += 1

            diff = target.minutes_of_day - fields.wall_time.minutes_of_day
            if diff == 0:
                converged = True
                break

            if diff > HALF_DAY:
                diff -= MINUTES_PER_DAY
            elif diff <= -HALF_DAY:
                diff += MINUTES_PER_DAY

            d = d.shift_minutes(diff)

        if not converged:
            # 最后一次修正后的 d 还没被读过
            fields = read_fields(self.oracle.format_parts(d, zone, fields=DEFAULT_FIELDS))
            converged = fields.wall_time == target

        if not converged:
            logs.debug(
                f"[Resolver] {target} in {zone} not exact after {iterations} corrections, "
                f"returning best effort {d}"
            )
            return ResolvedMoment(instant=d, iterations=iterations, converged=False)

        other = self._tie_break(d, fields, target, zone)
        if other is not None:
            logs.debug(f"[Resolver] {target} in {zone} is ambiguous: {d} -> {other} ({self.config.ambiguity.value})")
            return ResolvedMoment(instant=other, iterations=iterations, converged=True, tie_broken=True)

        return ResolvedMoment(instant=d, iterations=iterations, converged=True)

    def shift_zone_preserving_wall_time(self, instant: Instant, old_zone: str, new_zone: str) -> Instant:
        """"17:00 Tokyo" → 换成 London 后仍显示 17:00（此时表示 London 的 17:00）。"""
        wall = self.render(instant, old_zone)
        return self.resolve(wall, new_zone, instant)

    # ------------------------------------------------------------
    # internals
    # ------------------------------------------------------------
    def _seed(self, target: WallTime, reference: Instant) -> Instant:
        """
        reference 在 observer_zone 下的日期 + 目标 HH:mm:00.000，
        按 observer_zone 在 reference 时刻的 UTC 偏移换算为 instant。
        """
        observed = read_fields(
            self.oracle.format_parts(reference, self.config.observer_zone, fields=DEFAULT_FIELDS)
        )
        offset_seconds = observed.naive_epoch_seconds() - reference.epoch_ms // 1000
        naive = Instant.from_utc_fields(observed.year, observed.month, observed.day, target.hour, target.minute)
        return naive.shift_seconds(-offset_seconds)

    def _offset_seconds(self, instant: Instant, zone: str, fields: Optional[LocalFields] = None) -> int:
        if fields is None:
            fields = read_fields(self.oracle.format_parts(instant, zone, fields=DEFAULT_FIELDS))
        return fields.naive_epoch_seconds() - instant.epoch_ms // 1000

    def _tie_break(
        self,
        d: Instant,
        fields: LocalFields,
        target: WallTime,
        zone: str,
    ) -> Optional[Instant]:
        """
        fall-back 重复的钟面时间有两个 instant；按 ambiguity 策略返回另一个（若存在）。

        另一个候选满足 c + offset(c) == d + offset(d)，即 c = d + offset(d) - offset(probe)。
        """
        policy = self.config.ambiguity
        if policy == AmbiguityPolicy.FIRST:
            return None

        sign = -1 if policy == AmbiguityPolicy.EARLIER else 1
        probe = d.shift_minutes(sign * AMBIGUITY_PROBE_MINUTES)

        offset_d = self._offset_seconds(d, zone, fields)
        offset_probe = self._offset_seconds(probe, zone)
        if offset_probe == offset_d:
            return None

        candidate = d.shift_seconds(offset_d - offset_probe)
        if (candidate < d) != (sign < 0) or candidate == d:
            return None
        if self.render(candidate, zone) != target:
            return None
        return candidate
