import datetime as dt
import re

from clinic.domain.exceptions import InvalidDataError

DATE_FORMAT = "%Y-%m-%d"
DATETIME_FORMAT = "%Y-%m-%d %H:%M"

_DATE_SHAPE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_DATETIME_SHAPE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}")


def now() -> dt.datetime:
    """Wall-clock local time; the default clock for every service."""
    return dt.datetime.now()


def parse_date(text: str | None) -> dt.date | None:
    """Parse ``2026-03-22`` → ``date(2026, 3, 22)``. Blank input yields ``None``."""
    if text is None or not text.strip():
        return None
    text = text.strip()
    try:
        if not _DATE_SHAPE.fullmatch(text):
            raise ValueError(text)
        return dt.datetime.strptime(text, DATE_FORMAT).date()
    except ValueError as exc:
        raise InvalidDataError("Invalid date format. Expected format: yyyy-MM-dd") from exc


def parse_datetime(text: str | None) -> dt.datetime | None:
    """Parse ``2026-03-22 14:30`` → ``datetime(2026, 3, 22, 14, 30)``. Blank input yields ``None``."""
    if text is None or not text.strip():
        return None
    text = text.strip()
    try:
        if not _DATETIME_SHAPE.fullmatch(text):
            raise ValueError(text)
        return dt.datetime.strptime(text, DATETIME_FORMAT)
    except ValueError as exc:
        raise InvalidDataError(
            "Invalid datetime format. Expected format: yyyy-MM-dd HH:mm"
        ) from exc


def format_date(date: dt.date | None) -> str:
    if date is None:
        return ""
    return date.strftime(DATE_FORMAT)


def format_datetime(value: dt.datetime | None) -> str:
    if value is None:
        return ""
    return value.strftime(DATETIME_FORMAT)


def is_valid_date(text: str | None) -> bool:
    if text is None or not text.strip():
        return False
    try:
        parse_date(text)
    except InvalidDataError:
        return False
    return True


def is_valid_datetime(text: str | None) -> bool:
    if text is None or not text.strip():
        return False
    try:
        parse_datetime(text)
    except InvalidDataError:
        return False
    return True


def is_future_datetime(value: dt.datetime | None, reference: dt.datetime) -> bool:
    """True only when ``value`` is strictly after ``reference``; equal is not future."""
    return value is not None and value > reference


def is_past_datetime(value: dt.datetime | None, reference: dt.datetime) -> bool:
    return value is not None and value < reference


def calculate_age(birth_date: dt.date | None, today: dt.date | None = None) -> int:
    """Completed years between ``birth_date`` and ``today`` (0 when unknown)."""
    if birth_date is None:
        return 0
    today = today or dt.date.today()
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age
