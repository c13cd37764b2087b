# wallclock/config/resolver_config.py
from enum import Enum

from pydantic import BaseModel, Field


class AmbiguityPolicy(str, Enum):
    """Which occurrence of a repeated (fall-back) wall time the resolver returns."""

    EARLIER = "earlier"
    LATER = "later"
    FIRST = "first"     # whatever the iteration converged to


class ResolverConfig(BaseModel):
    max_iterations: int = Field(default=3, ge=1)
    observer_zone: str = "UTC"
    ambiguity: AmbiguityPolicy = AmbiguityPolicy.EARLIER
