import datetime as dt

import pytest

from clinic.domain.models import Appointment, AppointmentStatus, Doctor, MedicalRecord, Patient
from clinic.records.adapters.memory import (
    InMemoryAppointmentRepository,
    InMemoryDoctorRepository,
    InMemoryMedicalRecordRepository,
    InMemoryPatientRepository,
)


class TestInMemoryStore:
    def test_save_then_find(self) -> None:
        repo = InMemoryPatientRepository()
        patient = Patient(patient_id="PAT1", last_name="Doe")

        repo.save(patient)

        assert repo.find_by_id("PAT1") == patient
        assert repo.exists_by_id("PAT1")
        assert repo.count() == 1

    def test_save_replaces_same_id(self) -> None:
        repo = InMemoryPatientRepository()
        repo.save(Patient(patient_id="PAT1", last_name="Doe"))
        repo.save(Patient(patient_id="PAT1", last_name="Roe"))

        assert repo.count() == 1
        assert repo.find_by_id("PAT1").last_name == "Roe"  # type: ignore[union-attr]

    def test_save_requires_id(self) -> None:
        with pytest.raises(ValueError, match="without an id"):
            InMemoryPatientRepository().save(Patient())

    def test_missing_id(self) -> None:
        repo = InMemoryPatientRepository()
        assert repo.find_by_id("nope") is None
        assert not repo.exists_by_id("nope")

    def test_delete_is_silent_for_missing(self) -> None:
        repo = InMemoryPatientRepository()
        repo.save(Patient(patient_id="PAT1"))

        repo.delete_by_id("PAT1")
        repo.delete_by_id("PAT1")

        assert repo.count() == 0

    def test_clear(self) -> None:
        repo = InMemoryPatientRepository()
        repo.save(Patient(patient_id="PAT1"))
        repo.clear()
        assert repo.find_all() == []


class TestPatientFilters:
    def test_last_name_is_case_insensitive(self) -> None:
        repo = InMemoryPatientRepository()
        repo.save(Patient(patient_id="PAT1", last_name="Doe"))
        repo.save(Patient(patient_id="PAT2", last_name="Smith"))

        assert [p.patient_id for p in repo.find_by_last_name("DOE")] == ["PAT1"]

    def test_blood_group(self) -> None:
        repo = InMemoryPatientRepository()
        repo.save(Patient(patient_id="PAT1", blood_group="A+"))
        repo.save(Patient(patient_id="PAT2", blood_group="O+"))

        assert [p.patient_id for p in repo.find_by_blood_group("O+")] == ["PAT2"]


class TestDoctorFilters:
    def test_specialization_and_availability(self) -> None:
        repo = InMemoryDoctorRepository()
        repo.save(Doctor(doctor_id="DOC1", specialization="Cardiology"))
        repo.save(Doctor(doctor_id="DOC2", specialization="Pediatrics", is_available=False))

        assert [d.doctor_id for d in repo.find_by_specialization("cardiology")] == ["DOC1"]
        assert [d.doctor_id for d in repo.find_available()] == ["DOC1"]


class TestAppointmentFilters:
    @pytest.fixture
    def repo(self) -> InMemoryAppointmentRepository:
        repo = InMemoryAppointmentRepository()
        repo.save(
            Appointment(
                appointment_id="APT1",
                patient_id="PAT1",
                doctor_id="DOC1",
                appointment_datetime=dt.datetime(2026, 6, 16, 9, 0),
            )
        )
        repo.save(
            Appointment(
                appointment_id="APT2",
                patient_id="PAT2",
                doctor_id="DOC1",
                appointment_datetime=dt.datetime(2026, 6, 16, 23, 59),
                status=AppointmentStatus.CONFIRMED,
            )
        )
        repo.save(
            Appointment(
                appointment_id="APT3",
                patient_id="PAT1",
                doctor_id="DOC2",
                appointment_datetime=dt.datetime(2026, 6, 17, 0, 0),
            )
        )
        return repo

    def test_by_patient(self, repo: InMemoryAppointmentRepository) -> None:
        assert {a.appointment_id for a in repo.find_by_patient_id("PAT1")} == {"APT1", "APT3"}

    def test_by_doctor(self, repo: InMemoryAppointmentRepository) -> None:
        assert {a.appointment_id for a in repo.find_by_doctor_id("DOC1")} == {"APT1", "APT2"}

    def test_by_status(self, repo: InMemoryAppointmentRepository) -> None:
        found = repo.find_by_status(AppointmentStatus.CONFIRMED)
        assert [a.appointment_id for a in found] == ["APT2"]

    def test_by_calendar_date(self, repo: InMemoryAppointmentRepository) -> None:
        found = repo.find_by_date(dt.date(2026, 6, 16))
        assert {a.appointment_id for a in found} == {"APT1", "APT2"}


class TestMedicalRecordFilters:
    def test_by_patient_is_newest_first(self) -> None:
        repo = InMemoryMedicalRecordRepository()
        repo.save(
            MedicalRecord(record_id="REC1", patient_id="PAT1", record_datetime=dt.datetime(2026, 1, 1))
        )
        repo.save(
            MedicalRecord(record_id="REC2", patient_id="PAT1", record_datetime=dt.datetime(2026, 3, 1))
        )

        assert [r.record_id for r in repo.find_by_patient_id("PAT1")] == ["REC2", "REC1"]

    def test_by_appointment(self) -> None:
        repo = InMemoryMedicalRecordRepository()
        repo.save(MedicalRecord(record_id="REC1", appointment_id="APT1"))
        repo.save(MedicalRecord(record_id="REC2"))

        assert repo.find_by_appointment_id("APT1").record_id == "REC1"  # type: ignore[union-attr]
        assert repo.find_by_appointment_id("APT9") is None
