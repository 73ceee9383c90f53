from loguru import logger

from clinic.domain import validation
from clinic.domain.datetime_helpers import now
from clinic.domain.exceptions import InvalidDataError, MedicalRecordNotFoundError
from clinic.domain.models import MedicalRecord
from clinic.records.adapters.id_generators import random_id
from clinic.records.doctors import DoctorService
from clinic.records.patients import PatientService
from clinic.records.ports import Clock, IdGenerator, MedicalRecordRepository

ID_PREFIX = "REC"


class MedicalRecordService:
    """Creates and maintains visit records. A record's timestamp never changes."""

    def __init__(
        self,
        repository: MedicalRecordRepository,
        patient_service: PatientService,
        doctor_service: DoctorService,
        id_generator: IdGenerator = random_id,
        clock: Clock = now,
    ) -> None:
        self._repository = repository
        self._patients = patient_service
        self._doctors = doctor_service
        self._new_id = id_generator
        self._clock = clock

    def create_medical_record(self, record: MedicalRecord) -> MedicalRecord:
        """Store a new record, stamped with the clock when it carries no time."""
        _validate_record(record)
        self._check_references(record)

        record_id = record.record_id
        if record_id is None or not record_id.strip():
            record_id = self._new_id(ID_PREFIX)
            logger.debug("Generated medical record id {}", record_id)
        else:
            record_id = record_id.strip()

        saved = self._repository.save(
            record.model_copy(
                update={
                    "record_id": record_id,
                    "record_datetime": record.record_datetime or self._clock(),
                }
            )
        )
        logger.info("Medical record created: id={}, patient={}", record_id, saved.patient_id)
        return saved

    def get_medical_record_by_id(self, record_id: str) -> MedicalRecord:
        validation.require_id_format(record_id, "Record ID")
        record = self._repository.find_by_id(record_id)
        if record is None:
            raise MedicalRecordNotFoundError(record_id)
        return record

    def get_all_medical_records(self) -> list[MedicalRecord]:
        return self._repository.find_all()

    def get_medical_records_by_patient(self, patient_id: str) -> list[MedicalRecord]:
        """A patient's history, newest record first."""
        validation.require_not_empty(patient_id, "Patient ID")
        return self._repository.find_by_patient_id(patient_id)

    def get_medical_records_by_doctor(self, doctor_id: str) -> list[MedicalRecord]:
        validation.require_not_empty(doctor_id, "Doctor ID")
        return self._repository.find_by_doctor_id(doctor_id)

    def get_medical_record_by_appointment(self, appointment_id: str) -> MedicalRecord | None:
        validation.require_not_empty(appointment_id, "Appointment ID")
        return self._repository.find_by_appointment_id(appointment_id)

    def update_medical_record(self, record_id: str, updated: MedicalRecord) -> MedicalRecord:
        """Replace a record's contents; the id and ``record_datetime`` are kept."""
        existing = self.get_medical_record_by_id(record_id)
        _validate_record(updated)

        saved = self._repository.save(
            updated.model_copy(
                update={"record_id": record_id, "record_datetime": existing.record_datetime}
            )
        )
        logger.info("Medical record updated: id={}", record_id)
        return saved

    def delete_medical_record(self, record_id: str) -> None:
        validation.require_id_format(record_id, "Record ID")
        if not self._repository.exists_by_id(record_id):
            raise MedicalRecordNotFoundError(record_id)
        self._repository.delete_by_id(record_id)
        logger.info("Medical record deleted: id={}", record_id)

    def get_total_record_count(self) -> int:
        return self._repository.count()

    def _check_references(self, record: MedicalRecord) -> None:
        if not self._patients.patient_exists(record.patient_id):
            logger.warning("Medical record refers to unknown patient {}", record.patient_id)
            raise InvalidDataError(f"Patient not found with ID: {record.patient_id}")
        if not self._doctors.doctor_exists(record.doctor_id):
            logger.warning("Medical record refers to unknown doctor {}", record.doctor_id)
            raise InvalidDataError(f"Doctor not found with ID: {record.doctor_id}")


def _validate_record(record: MedicalRecord) -> None:
    validation.require_not_none(record, "Medical record")
    validation.require_not_empty(record.patient_id, "Patient ID")
    validation.require_not_empty(record.doctor_id, "Doctor ID")
    validation.require_not_empty(record.chief_complaint, "Chief complaint")
    validation.require_not_empty(record.diagnosis, "Diagnosis")
    validation.require_naive_datetime(record.record_datetime, "Record date/time")
