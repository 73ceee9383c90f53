import datetime as dt
from enum import Enum

from pydantic import BaseModel, ConfigDict, NaiveDatetime

from clinic.domain.datetime_helpers import calculate_age


class AppointmentStatus(str, Enum):
    """Possible states of an appointment."""

    SCHEDULED = "SCHEDULED"
    CONFIRMED = "CONFIRMED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    NO_SHOW = "NO_SHOW"


class Patient(BaseModel):
    """A registered patient.

    Text fields default to empty so that a half-filled form still builds a
    model; the patient service decides whether it is acceptable. The service
    also stamps ``registration_date`` from its clock when it is left empty.
    """

    model_config = ConfigDict(frozen=True)

    patient_id: str | None = None
    first_name: str = ""
    last_name: str = ""
    date_of_birth: dt.date | None = None
    gender: str = ""
    phone_number: str = ""
    email: str = ""
    address: str = ""
    blood_group: str = ""
    registration_date: dt.date | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def age(self) -> int:
        return calculate_age(self.date_of_birth)

    def age_on(self, day: dt.date) -> int:
        return calculate_age(self.date_of_birth, day)


class Doctor(BaseModel):
    """A registered doctor."""

    model_config = ConfigDict(frozen=True)

    doctor_id: str | None = None
    first_name: str = ""
    last_name: str = ""
    specialization: str = ""
    phone_number: str = ""
    email: str = ""
    years_of_experience: int = 0
    qualification: str = ""
    is_available: bool = True

    @property
    def full_name(self) -> str:
        return f"Dr. {self.first_name} {self.last_name}"


class Appointment(BaseModel):
    """A patient's visit booked with a doctor."""

    model_config = ConfigDict(frozen=True)

    appointment_id: str | None = None
    patient_id: str = ""
    doctor_id: str = ""
    appointment_datetime: NaiveDatetime | None = None
    reason: str = ""
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    notes: str | None = None
    duration_minutes: int = 30

    def is_upcoming_at(self, now: dt.datetime) -> bool:
        """Strictly in the future and still SCHEDULED (CONFIRMED does not count)."""
        return (
            self.appointment_datetime is not None
            and self.appointment_datetime > now
            and self.status == AppointmentStatus.SCHEDULED
        )

    def is_past_at(self, now: dt.datetime) -> bool:
        return self.appointment_datetime is not None and self.appointment_datetime < now

    @property
    def is_upcoming(self) -> bool:
        return self.is_upcoming_at(dt.datetime.now())

    @property
    def is_past(self) -> bool:
        return self.is_past_at(dt.datetime.now())


class Medication(BaseModel):
    """One line of a prescription."""

    model_config = ConfigDict(frozen=True)

    medicine_name: str = ""
    dosage: str = ""
    frequency: str = ""
    duration_days: int = 0
    instructions: str | None = None


class Prescription(BaseModel):
    """A prescription written by a doctor for a patient.

    ``medications`` is a tuple in the order the items were added. A missing
    ``prescription_date`` is filled from the service clock when the
    prescription is created; until then it has no validity window.
    """

    model_config = ConfigDict(frozen=True)

    prescription_id: str | None = None
    patient_id: str = ""
    doctor_id: str = ""
    appointment_id: str | None = None
    prescription_date: dt.date | None = None
    medications: tuple[Medication, ...] = ()
    diagnosis: str = ""
    instructions: str | None = None
    validity_days: int = 30

    @property
    def expiry_date(self) -> dt.date | None:
        if self.prescription_date is None:
            return None
        return self.prescription_date + dt.timedelta(days=self.validity_days)

    def is_valid_on(self, day: dt.date) -> bool:
        """The expiry day itself is still inside the validity window."""
        expiry = self.expiry_date
        return expiry is not None and day <= expiry

    @property
    def is_valid(self) -> bool:
        return self.is_valid_on(dt.date.today())


class MedicalRecord(BaseModel):
    """Clinical notes taken during a visit.

    ``record_datetime`` is stamped from the service clock on creation when left
    empty.
    """

    model_config = ConfigDict(frozen=True)

    record_id: str | None = None
    patient_id: str = ""
    doctor_id: str = ""
    appointment_id: str | None = None
    record_datetime: NaiveDatetime | None = None
    chief_complaint: str = ""
    diagnosis: str = ""
    treatment: str | None = None
    vital_signs: str | None = None
    lab_results: str | None = None
    notes: str | None = None
    follow_up_instructions: str | None = None
