#!filepath: wallclock/catalog/zones.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

import yaml

from wallclock.utils.logger import logs

CITIES_PATH = os.path.join(os.path.dirname(__file__), "cities.yml")


@dataclass(frozen=True)
class ZoneOption:
    label: str
    value: str


def zone_label(zone: str) -> str:
    return zone.replace("_", " ")


def city_label(city: Dict[str, Any]) -> str:
    province = city.get("province") or ""
    if province:
        return f"{city['city']}, {province}, {city['country']}"
    return f"{city['city']}, {city['country']}"


def load_cities(path: str = CITIES_PATH) -> List[Dict[str, Any]]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or []


class ZoneCatalog:
    """
    时区下拉框的数据源：
      - 标准 IANA 时区（label 中 _ 换成空格）
      - 城市（"City, Province, Country" → 所在时区）
    """

    def __init__(self, zones: Iterable[str], cities: Optional[List[Dict[str, Any]]] = None):
        self.zones = sorted(zones)
        supported = set(self.zones)

        city_options = []
        for city in cities or []:
            if city.get("timezone") not in supported:
                logs.debug(f"[ZoneCatalog] skip city {city.get('city')!r}: unsupported zone {city.get('timezone')!r}")
                continue
            city_options.append(ZoneOption(city_label(city), city["timezone"]))

        self.options: List[ZoneOption] = [ZoneOption(zone_label(z), z) for z in self.zones] + city_options

    @classmethod
    def from_oracle(cls, oracle, cities_path: str = CITIES_PATH) -> "ZoneCatalog":
        return cls(oracle.list_supported_zones(), load_cities(cities_path))

    def search(self, query: str = "", limit: Optional[int] = 100) -> List[ZoneOption]:
        if query:
            q = query.lower()
            matches = [o for o in self.options if q in o.label.lower()]
        else:
            matches = list(self.options)
        return matches if limit is None else matches[:limit]

    def label_for(self, value: str) -> str:
        for option in self.options:
            if option.value == value:
                return option.label
        return value
