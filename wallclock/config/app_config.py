#!filepath: wallclock/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

from .log_config import LogConfig
from .resolver_config import ResolverConfig
from .display_config import DisplayConfig


def project_root() -> str:
    """
    返回项目根目录（基于当前文件位置推导）:
    wallclock/config/app_config.py → wallclock/config → wallclock → project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return os.path.join(os.path.dirname(__file__), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig = LogConfig()
    resolver: ResolverConfig = ResolverConfig()
    display: DisplayConfig = DisplayConfig()

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用包内 wallclock/config/base.yml
        - WALLCLOCK_OBSERVER_ZONE 覆盖 resolver.observer_zone
        """
        load_dotenv(os.path.join(project_root(), ".env"))

        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        observer_zone = os.getenv("WALLCLOCK_OBSERVER_ZONE")
        if observer_zone:
            raw.setdefault("resolver", {})
            raw["resolver"]["observer_zone"] = observer_zone

        return cls(**raw)
