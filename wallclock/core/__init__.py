from .types import Instant, WallTime, LocalFields, ResolvedMoment, LOCAL_ZONE
from .oracle import OffsetOracle, ZoneInfoOracle
from .resolver import WallTimeResolver
from .formatting import Formatter, time_options
