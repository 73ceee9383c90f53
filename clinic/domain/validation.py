"""Field-level validation rules shared by every records service.

Each ``require_*`` function returns silently or raises ``InvalidDataError``
with a message naming the field and the rule it broke. The first failing rule
wins; nothing is aggregated.
"""

import datetime as dt
import re
from typing import Any

from clinic.domain.exceptions import InvalidDataError

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
PHONE_PATTERN = re.compile(r"[0-9]{10}")
BLOOD_GROUP_PATTERN = re.compile(r"(A|B|AB|O)[+-]")

GENDERS = ("male", "female", "other")


def require_not_none(value: Any, field_name: str) -> None:
    if value is None:
        raise InvalidDataError(f"{field_name} cannot be null")


def require_not_empty(value: str | None, field_name: str) -> None:
    if is_blank(value):
        raise InvalidDataError(f"{field_name} cannot be empty")


def require_email(email: str | None) -> None:
    if not is_valid_email(email):
        raise InvalidDataError(f"Invalid email format: {email}")


def require_phone_number(phone_number: str | None) -> None:
    if not is_valid_phone_number(phone_number):
        raise InvalidDataError(f"Invalid phone number. Must be 10 digits: {phone_number}")


def require_blood_group(blood_group: str | None) -> None:
    if not is_valid_blood_group(blood_group):
        raise InvalidDataError(
            f"Invalid blood group. Must be A+, A-, B+, B-, AB+, AB-, O+, or O-: {blood_group}"
        )


def require_gender(gender: str | None) -> None:
    if gender is None or gender.lower() not in GENDERS:
        raise InvalidDataError("Invalid gender. Must be Male, Female, or Other")


def require_positive(number: int, field_name: str) -> None:
    if number <= 0:
        raise InvalidDataError(f"{field_name} must be a positive number")


def require_non_negative(number: int, field_name: str) -> None:
    if number < 0:
        raise InvalidDataError(f"{field_name} cannot be negative")


def require_naive_datetime(value: dt.datetime | None, field_name: str) -> None:
    """Times are local wall-clock values; an attached timezone is refused."""
    if value is not None and value.tzinfo is not None:
        raise InvalidDataError(f"{field_name} must not carry a timezone")


def require_id_format(entity_id: str | None, id_type: str) -> None:
    """An id must be non-blank and at least three characters (the prefix)."""
    require_not_empty(entity_id, id_type)
    if entity_id is None or len(entity_id) < 3:
        raise InvalidDataError(f"{id_type} must be at least 3 characters long")


def is_valid_email(email: str | None) -> bool:
    return email is not None and EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_phone_number(phone_number: str | None) -> bool:
    return phone_number is not None and PHONE_PATTERN.fullmatch(phone_number) is not None


def is_valid_blood_group(blood_group: str | None) -> bool:
    return blood_group is not None and BLOOD_GROUP_PATTERN.fullmatch(blood_group) is not None


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()
