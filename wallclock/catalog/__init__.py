from .zones import ZoneCatalog, ZoneOption
