# wallclock/config/display_config.py
from pydantic import BaseModel, Field


class DisplayConfig(BaseModel):
    hour12: bool = False
    time_step_minutes: int = Field(default=15, ge=1, le=720)
    search_limit: int = Field(default=100, ge=1)
    default_source_zone: str = "America/New_York"
    default_target_zone: str = "UTC"
