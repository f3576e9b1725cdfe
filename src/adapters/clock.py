from datetime import date, datetime


class SystemClock:
    def now(self) -> datetime:
        return datetime.now()

    def today(self) -> date:
        return self.now().date()


class FixedClock:
    """Clock pinned to one date, for tests and demos."""

    def __init__(self, fixed: date) -> None:
        self._today = fixed

    def today(self) -> date:
        return self._today
