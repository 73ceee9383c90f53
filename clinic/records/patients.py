from loguru import logger

from clinic.domain import validation
from clinic.domain.datetime_helpers import now
from clinic.domain.exceptions import DuplicateIdError, PatientNotFoundError
from clinic.domain.models import Patient
from clinic.records.adapters.id_generators import random_id
from clinic.records.ports import Clock, IdGenerator, PatientRepository

ID_PREFIX = "PAT"


class PatientService:
    """Registers patients and answers queries about them.

    Also serves as the referential-integrity check (``patient_exists``) for
    services that point at a patient.
    """

    def __init__(
        self,
        repository: PatientRepository,
        id_generator: IdGenerator = random_id,
        clock: Clock = now,
    ) -> None:
        self._repository = repository
        self._new_id = id_generator
        self._clock = clock

    def register_patient(self, patient: Patient) -> Patient:
        """Validate, assign an id when none was given, and store the patient.

        An explicit id is stored without surrounding whitespace, and a missing
        registration date is taken from the clock.

        Raises:
            InvalidDataError: A field is missing or malformed.
            DuplicateIdError: A patient with the same id is already stored.
        """
        _validate_patient(patient)

        patient_id = patient.patient_id
        if patient_id is None or not patient_id.strip():
            patient_id = self._new_id(ID_PREFIX)
            logger.debug("Generated patient id {}", patient_id)
        else:
            patient_id = patient_id.strip()

        if self._repository.exists_by_id(patient_id):
            logger.warning("Rejected duplicate patient id {}", patient_id)
            raise DuplicateIdError("Patient", patient_id)

        saved = self._repository.save(
            patient.model_copy(
                update={
                    "patient_id": patient_id,
                    "registration_date": patient.registration_date or self._clock().date(),
                }
            )
        )
        logger.info("Patient registered: id={}", saved.patient_id)
        return saved

    def get_patient_by_id(self, patient_id: str) -> Patient:
        validation.require_id_format(patient_id, "Patient ID")
        patient = self._repository.find_by_id(patient_id)
        if patient is None:
            raise PatientNotFoundError(patient_id)
        return patient

    def get_all_patients(self) -> list[Patient]:
        return self._repository.find_all()

    def get_patients_by_last_name(self, last_name: str) -> list[Patient]:
        validation.require_not_empty(last_name, "Last name")
        patients = self._repository.find_by_last_name(last_name)
        logger.debug("Found {} patient(s) by last name", len(patients))
        return patients

    def get_patients_by_blood_group(self, blood_group: str) -> list[Patient]:
        validation.require_blood_group(blood_group)
        return self._repository.find_by_blood_group(blood_group)

    def update_patient(self, patient_id: str, updated: Patient) -> Patient:
        """Replace a patient's details; the id and registration date are kept."""
        existing = self.get_patient_by_id(patient_id)
        _validate_patient(updated)

        patient = updated.model_copy(
            update={
                "patient_id": patient_id,
                "registration_date": existing.registration_date,
            }
        )
        saved = self._repository.save(patient)
        logger.info("Patient updated: id={}", patient_id)
        return saved

    def delete_patient(self, patient_id: str) -> None:
        validation.require_id_format(patient_id, "Patient ID")
        if not self._repository.exists_by_id(patient_id):
            raise PatientNotFoundError(patient_id)
        self._repository.delete_by_id(patient_id)
        logger.info("Patient deleted: id={}", patient_id)

    def patient_exists(self, patient_id: str | None) -> bool:
        """Never raises: a missing or blank id simply does not exist."""
        if patient_id is None or not patient_id.strip():
            return False
        return self._repository.exists_by_id(patient_id)

    def get_total_patient_count(self) -> int:
        return self._repository.count()


def _validate_patient(patient: Patient) -> None:
    validation.require_not_none(patient, "Patient")
    validation.require_not_empty(patient.first_name, "First name")
    validation.require_not_empty(patient.last_name, "Last name")
    validation.require_not_none(patient.date_of_birth, "Date of birth")
    validation.require_gender(patient.gender)
    validation.require_phone_number(patient.phone_number)
    validation.require_email(patient.email)
    validation.require_blood_group(patient.blood_group)
    validation.require_not_empty(patient.address, "Address")
