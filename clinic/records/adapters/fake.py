import datetime as dt


class FakeClock:
    """Settable stand-in for the wall clock.

    Pass it wherever a service takes ``clock``; move time with ``advance`` or
    by assigning ``current`` directly.
    """

    def __init__(self, current: dt.datetime) -> None:
        self.current = current

    def __call__(self) -> dt.datetime:
        return self.current

    def advance(self, **kwargs: float) -> None:
        self.current += dt.timedelta(**kwargs)
