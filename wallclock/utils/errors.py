# wallclock/utils/errors.py
class WallclockError(RuntimeError):
    """Base class for everything raised on purpose by wallclock."""


class UserInputError(WallclockError):
    """
    Raised for invalid user-provided input (zones, wall times, dates).
    Should NOT print traceback.
    """


class InvalidZoneError(UserInputError, ValueError):
    """The offset oracle does not know the zone identifier."""

    def __init__(self, zone: str):
        super().__init__(f"Unknown timezone: {zone!r}")
        self.zone = zone


class WallTimeError(UserInputError, ValueError):
    """Hour/minute outside the accepted range, or an unparsable HH:mm string."""
