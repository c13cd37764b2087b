#!filepath: wallclock/cli.py
import time
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import date as _date
from typing import Optional

import typer
from rich import print
from rich.markup import escape
from rich.table import Table

from wallclock import __version__
from wallclock.catalog.zones import ZoneCatalog
from wallclock.config.app_config import AppConfig
from wallclock.core.formatting import Formatter
from wallclock.core.oracle import ZoneInfoOracle, local_zone_name
from wallclock.core.resolver import WallTimeResolver
from wallclock.core.types import Instant, LOCAL_ZONE, WallTime
from wallclock.session.clock_session import ClockSession
from wallclock.utils.errors import UserInputError
from wallclock.utils.logger import Logging, logs

app = typer.Typer(help="Wallclock timezone converter CLI")


@dataclass
class Runtime:
    config: AppConfig
    oracle: ZoneInfoOracle
    resolver: WallTimeResolver
    formatter: Formatter


@logs.catch(msg="failed to build runtime")
def build_runtime(config_path: Optional[str] = None) -> Runtime:
    config = AppConfig.load(config_path)
    Logging(
        log_dir=config.log.dir,
        rotation=config.log.rotation,
        retention=config.log.retention,
        log_level=config.log.level,
    )
    oracle = ZoneInfoOracle()
    return Runtime(
        config=config,
        oracle=oracle,
        resolver=WallTimeResolver(oracle, config.resolver),
        formatter=Formatter(oracle),
    )


@contextmanager
def user_errors():
    """用户输入错误：红字提示 + exit 2，不打印 traceback。"""
    try:
        yield
    except UserInputError as e:
        print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=2)


def _reference_for(day: Optional[str]) -> Instant:
    if day is None:
        return Instant.now()
    try:
        d = _date.fromisoformat(day)
    except ValueError:
        raise UserInputError(f"Expected YYYY-MM-DD, got {day!r}")
    return Instant.from_utc_fields(d.year, d.month, d.day, 12)


def _zone_title(zone: str) -> str:
    return local_zone_name() if zone == LOCAL_ZONE else zone.replace("_", " ")


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[str] = typer.Option(None, "--config", help="YAML config path"),
):
    ctx.obj = build_runtime(config)


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def convert(
    ctx: typer.Context,
    wall: str = typer.Argument(..., help="HH:mm in the source zone"),
    source: Optional[str] = typer.Option(None, "--from", help="source zone"),
    target: Optional[str] = typer.Option(None, "--to", help="target zone"),
    day: Optional[str] = typer.Option(None, "--date", help="reference date YYYY-MM-DD (default: today)"),
    hour12: Optional[bool] = typer.Option(None, "--hour12/--hour24"),
):
    """
    What time is WALL in --from, expressed in --to?
    """
    rt: Runtime = ctx.obj
    source = source or rt.config.display.default_source_zone
    target = target or rt.config.display.default_target_zone
    h12 = rt.config.display.hour12 if hour12 is None else hour12

    with user_errors():
        moment = rt.resolver.resolve_detailed(WallTime.parse(wall), source, _reference_for(day))
        instant = moment.instant

        table = Table(title=f"{wall} in {_zone_title(source)}")
        table.add_column("Zone")
        table.add_column("Time")
        table.add_column("Date")
        for zone in (source, target):
            table.add_row(
                _zone_title(zone),
                rt.formatter.format_time(instant, zone, hour12=h12),
                rt.formatter.format_date(instant, zone),
            )

    print(table)
    print(f"UTC {instant}")
    if not moment.converged:
        print(f"[yellow]{wall} does not exist in {source} on that date; showing nearest time[/yellow]")


@app.command()
def shift(
    ctx: typer.Context,
    wall: str = typer.Argument(..., help="HH:mm shown before the zone change"),
    source: str = typer.Option(..., "--from", help="zone the wall time is read in"),
    target: str = typer.Option(..., "--to", help="new zone keeping the same wall time"),
    day: Optional[str] = typer.Option(None, "--date", help="reference date YYYY-MM-DD (default: today)"),
):
    """
    Keep the displayed wall time while switching zone (17:00 Tokyo → 17:00 London).
    """
    rt: Runtime = ctx.obj
    with user_errors():
        before = rt.resolver.resolve(WallTime.parse(wall), source, _reference_for(day))
        after = rt.resolver.shift_zone_preserving_wall_time(before, source, target)
        print(
            f"{rt.formatter.format_time(before, source)} {_zone_title(source)} (UTC {before}) → "
            f"{rt.formatter.format_time(after, target)} {_zone_title(target)} (UTC {after})"
        )


@app.command()
def now(
    ctx: typer.Context,
    zone: str = typer.Option(LOCAL_ZONE, "--zone", help="zone to display (default: local)"),
    hour12: bool = typer.Option(False, "--hour12/--hour24"),
):
    rt: Runtime = ctx.obj
    with user_errors():
        instant = Instant.now()
        clock, period = rt.formatter.format_clock(instant, zone, hour12=hour12)
        print(f"[bold]{clock}[/bold]{' ' + period if period else ''}  {_zone_title(zone)}")
        print(rt.formatter.format_date(instant, zone))


@app.command()
def zones(
    ctx: typer.Context,
    search: str = typer.Option("", "--search", help="case-insensitive label filter"),
    limit: Optional[int] = typer.Option(None, "--limit", min=1),
):
    rt: Runtime = ctx.obj
    catalog = ZoneCatalog.from_oracle(rt.oracle)
    if limit is None:
        limit = rt.config.display.search_limit
    matches = catalog.search(search, limit=None)

    if not matches:
        print("No results found.")
        return

    table = Table()
    table.add_column("Label")
    table.add_column("Zone")
    for option in matches[:limit]:
        table.add_row(option.label, option.value)
    print(table)
    if len(matches) > limit:
        print(f"... {len(matches) - limit} more, keep typing to narrow down")


@app.command()
def watch(
    ctx: typer.Context,
    zone: str = typer.Option(LOCAL_ZONE, "--zone"),
    count: int = typer.Option(10, "--count", min=1),
    interval: float = typer.Option(1.0, "--interval", min=0.0),
):
    """
    Live clock: re-render once per interval, COUNT times.
    """
    rt: Runtime = ctx.obj
    session = ClockSession(resolver=rt.resolver, source_zone=zone, instant=Instant.now(),
                           hour12=rt.config.display.hour12)
    with user_errors():
        for i in range(count):
            session.tick(Instant.now())
            clock, period, day = session.local_display(zone)
            print(f"{clock}{' ' + period if period else ''}  {day}")
            if i < count - 1:
                time.sleep(interval)


if __name__ == "__main__":
    app()

# python -m wallclock.cli convert 17:00 --from America/New_York --to Asia/Tokyo
