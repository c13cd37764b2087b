from .clock_session import ClockSession
