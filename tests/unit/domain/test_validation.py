import datetime as dt

import pytest

from clinic.domain import validation
from clinic.domain.exceptions import InvalidDataError


class TestRequireNotEmpty:
    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n"], ids=["none", "empty", "spaces", "whitespace"])
    def test_rejects_blank(self, value: str | None) -> None:
        with pytest.raises(InvalidDataError, match="First name cannot be empty"):
            validation.require_not_empty(value, "First name")

    def test_accepts_text(self) -> None:
        validation.require_not_empty(" x ", "First name")


class TestRequireNotNone:
    def test_rejects_none(self) -> None:
        with pytest.raises(InvalidDataError, match="Date of birth cannot be null"):
            validation.require_not_none(None, "Date of birth")

    def test_accepts_falsy_values(self) -> None:
        validation.require_not_none(0, "Count")
        validation.require_not_none("", "Text")


class TestEmail:
    @pytest.mark.parametrize(
        "email",
        ["john@example.com", "a.b+c_d-e@mail.example.org", "x@y.io"],
        ids=["simple", "local-part-symbols", "short-tld"],
    )
    def test_accepts(self, email: str) -> None:
        validation.require_email(email)
        assert validation.is_valid_email(email)

    @pytest.mark.parametrize(
        "email",
        [None, "", "john", "john@example", "john@example.c", "@example.com", "john@@example.com", "john@example.c0m"],
        ids=["none", "empty", "no-at", "no-tld", "one-letter-tld", "no-local", "double-at", "digit-tld"],
    )
    def test_rejects(self, email: str | None) -> None:
        with pytest.raises(InvalidDataError, match="Invalid email format"):
            validation.require_email(email)
        assert not validation.is_valid_email(email)


class TestPhoneNumber:
    def test_accepts_ten_digits(self) -> None:
        validation.require_phone_number("9876543210")

    @pytest.mark.parametrize(
        "phone",
        [None, "987654321", "98765432100", "987-654-3210", "+919876543210", "98765432a0", "９８７６５４３２１０"],
        ids=["none", "nine", "eleven", "dashes", "country-code", "letter", "fullwidth-digits"],
    )
    def test_rejects(self, phone: str | None) -> None:
        with pytest.raises(InvalidDataError, match="Must be 10 digits"):
            validation.require_phone_number(phone)
        assert not validation.is_valid_phone_number(phone)


class TestBloodGroup:
    @pytest.mark.parametrize("group", ["A+", "A-", "B+", "B-", "AB+", "AB-", "O+", "O-"])
    def test_accepts_all_eight(self, group: str) -> None:
        validation.require_blood_group(group)

    @pytest.mark.parametrize(
        "group",
        [None, "", "X", "a+", "ab-", "A", "C+", "AB", "O+ ", "BA+"],
        ids=["none", "empty", "unknown", "lower", "lower-ab", "no-sign", "bad-letter", "ab-no-sign", "trailing-space", "reversed"],
    )
    def test_rejects(self, group: str | None) -> None:
        with pytest.raises(InvalidDataError, match="Invalid blood group"):
            validation.require_blood_group(group)
        assert not validation.is_valid_blood_group(group)


class TestGender:
    @pytest.mark.parametrize("gender", ["Male", "female", "OTHER", "mAlE"])
    def test_is_case_insensitive(self, gender: str) -> None:
        validation.require_gender(gender)

    @pytest.mark.parametrize("gender", [None, "", "M", "unknown", " Male"])
    def test_rejects(self, gender: str | None) -> None:
        with pytest.raises(InvalidDataError, match="Must be Male, Female, or Other"):
            validation.require_gender(gender)


class TestNumbers:
    def test_positive_rejects_zero(self) -> None:
        with pytest.raises(InvalidDataError, match="Duration must be a positive number"):
            validation.require_positive(0, "Duration")

    def test_positive_accepts_one(self) -> None:
        validation.require_positive(1, "Duration")

    def test_non_negative_accepts_zero(self) -> None:
        validation.require_non_negative(0, "Years of experience")

    def test_non_negative_rejects_negative(self) -> None:
        with pytest.raises(InvalidDataError, match="Years of experience cannot be negative"):
            validation.require_non_negative(-1, "Years of experience")


class TestIdFormat:
    def test_rejects_blank(self) -> None:
        with pytest.raises(InvalidDataError, match="Patient ID cannot be empty"):
            validation.require_id_format(" ", "Patient ID")

    def test_rejects_short(self) -> None:
        with pytest.raises(InvalidDataError, match="at least 3 characters"):
            validation.require_id_format("PA", "Patient ID")

    def test_accepts_prefix_length(self) -> None:
        validation.require_id_format("PAT", "Patient ID")


class TestNaiveDatetime:
    def test_rejects_timezone(self) -> None:
        aware = dt.datetime(2030, 1, 1, 9, 0, tzinfo=dt.timezone.utc)
        with pytest.raises(InvalidDataError, match="must not carry a timezone"):
            validation.require_naive_datetime(aware, "Appointment date/time")

    @pytest.mark.parametrize("value", [None, dt.datetime(2030, 1, 1, 9, 0)], ids=["none", "naive"])
    def test_accepts(self, value: dt.datetime | None) -> None:
        validation.require_naive_datetime(value, "Appointment date/time")
