import datetime as dt
from typing import Callable, Protocol

from clinic.domain.models import (
    Appointment,
    AppointmentStatus,
    Doctor,
    MedicalRecord,
    Patient,
    Prescription,
)

Clock = Callable[[], dt.datetime]


class IdGenerator(Protocol):
    """Produces identifiers of the form ``<PREFIX><8 uppercase alphanumerics>``."""

    def __call__(self, prefix: str) -> str:
        ...


class PatientRepository(Protocol):
    """Storage for patients, keyed by ``patient_id``."""

    def save(self, patient: Patient) -> Patient:
        """Insert or replace the patient and return the stored value."""
        ...

    def find_by_id(self, patient_id: str) -> Patient | None:
        ...

    def find_all(self) -> list[Patient]:
        ...

    def find_by_last_name(self, last_name: str) -> list[Patient]:
        """Case-insensitive match on last name."""
        ...

    def find_by_blood_group(self, blood_group: str) -> list[Patient]:
        ...

    def exists_by_id(self, patient_id: str) -> bool:
        ...

    def delete_by_id(self, patient_id: str) -> None:
        ...

    def count(self) -> int:
        ...


class DoctorRepository(Protocol):
    """Storage for doctors, keyed by ``doctor_id``."""

    def save(self, doctor: Doctor) -> Doctor:
        ...

    def find_by_id(self, doctor_id: str) -> Doctor | None:
        ...

    def find_all(self) -> list[Doctor]:
        ...

    def find_by_specialization(self, specialization: str) -> list[Doctor]:
        """Case-insensitive match on specialization."""
        ...

    def find_available(self) -> list[Doctor]:
        ...

    def exists_by_id(self, doctor_id: str) -> bool:
        ...

    def delete_by_id(self, doctor_id: str) -> None:
        ...

    def count(self) -> int:
        ...


class AppointmentRepository(Protocol):
    """Storage for appointments, keyed by ``appointment_id``."""

    def save(self, appointment: Appointment) -> Appointment:
        ...

    def find_by_id(self, appointment_id: str) -> Appointment | None:
        ...

    def find_all(self) -> list[Appointment]:
        ...

    def find_by_patient_id(self, patient_id: str) -> list[Appointment]:
        ...

    def find_by_doctor_id(self, doctor_id: str) -> list[Appointment]:
        ...

    def find_by_status(self, status: AppointmentStatus) -> list[Appointment]:
        ...

    def find_by_date(self, date: dt.date) -> list[Appointment]:
        """Appointments whose date-time falls on ``date``."""
        ...

    def exists_by_id(self, appointment_id: str) -> bool:
        ...

    def delete_by_id(self, appointment_id: str) -> None:
        ...

    def count(self) -> int:
        ...


class PrescriptionRepository(Protocol):
    """Storage for prescriptions, keyed by ``prescription_id``."""

    def save(self, prescription: Prescription) -> Prescription:
        ...

    def find_by_id(self, prescription_id: str) -> Prescription | None:
        ...

    def find_all(self) -> list[Prescription]:
        ...

    def find_by_patient_id(self, patient_id: str) -> list[Prescription]:
        ...

    def find_by_doctor_id(self, doctor_id: str) -> list[Prescription]:
        ...

    def exists_by_id(self, prescription_id: str) -> bool:
        ...

    def delete_by_id(self, prescription_id: str) -> None:
        ...

    def count(self) -> int:
        ...


class MedicalRecordRepository(Protocol):
    """Storage for medical records, keyed by ``record_id``."""

    def save(self, record: MedicalRecord) -> MedicalRecord:
        ...

    def find_by_id(self, record_id: str) -> MedicalRecord | None:
        ...

    def find_all(self) -> list[MedicalRecord]:
        ...

    def find_by_patient_id(self, patient_id: str) -> list[MedicalRecord]:
        """Records for the patient, newest first."""
        ...

    def find_by_doctor_id(self, doctor_id: str) -> list[MedicalRecord]:
        ...

    def find_by_appointment_id(self, appointment_id: str) -> MedicalRecord | None:
        ...

    def exists_by_id(self, record_id: str) -> bool:
        ...

    def delete_by_id(self, record_id: str) -> None:
        ...

    def count(self) -> int:
        ...
