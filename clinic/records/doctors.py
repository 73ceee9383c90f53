from loguru import logger

from clinic.domain import validation
from clinic.domain.exceptions import DoctorNotFoundError, DuplicateIdError
from clinic.domain.models import Doctor
from clinic.records.adapters.id_generators import random_id
from clinic.records.ports import DoctorRepository, IdGenerator

ID_PREFIX = "DOC"


class DoctorService:
    """Registers doctors, tracks their availability and answers queries."""

    def __init__(
        self, repository: DoctorRepository, id_generator: IdGenerator = random_id
    ) -> None:
        self._repository = repository
        self._new_id = id_generator

    def register_doctor(self, doctor: Doctor) -> Doctor:
        """Validate, assign an id when none was given, and store the doctor.

        Raises:
            InvalidDataError: A field is missing or malformed.
            DuplicateIdError: A doctor with the same id is already stored.
        """
        _validate_doctor(doctor)

        doctor_id = doctor.doctor_id
        if doctor_id is None or not doctor_id.strip():
            doctor_id = self._new_id(ID_PREFIX)
            logger.debug("Generated doctor id {}", doctor_id)
        else:
            doctor_id = doctor_id.strip()

        if self._repository.exists_by_id(doctor_id):
            logger.warning("Rejected duplicate doctor id {}", doctor_id)
            raise DuplicateIdError("Doctor", doctor_id)

        saved = self._repository.save(doctor.model_copy(update={"doctor_id": doctor_id}))
        logger.info("Doctor registered: id={}", doctor_id)
        return saved

    def get_doctor_by_id(self, doctor_id: str) -> Doctor:
        validation.require_id_format(doctor_id, "Doctor ID")
        doctor = self._repository.find_by_id(doctor_id)
        if doctor is None:
            raise DoctorNotFoundError(doctor_id)
        return doctor

    def get_all_doctors(self) -> list[Doctor]:
        return self._repository.find_all()

    def get_doctors_by_specialization(self, specialization: str) -> list[Doctor]:
        validation.require_not_empty(specialization, "Specialization")
        return self._repository.find_by_specialization(specialization)

    def get_available_doctors(self) -> list[Doctor]:
        return self._repository.find_available()

    def update_doctor(self, doctor_id: str, updated: Doctor) -> Doctor:
        """Replace a doctor's details, keeping the id."""
        self.get_doctor_by_id(doctor_id)
        _validate_doctor(updated)

        saved = self._repository.save(updated.model_copy(update={"doctor_id": doctor_id}))
        logger.info("Doctor updated: id={}", doctor_id)
        return saved

    def set_doctor_availability(self, doctor_id: str, available: bool) -> Doctor:
        doctor = self.get_doctor_by_id(doctor_id)
        saved = self._repository.save(doctor.model_copy(update={"is_available": available}))
        logger.info("Doctor availability changed: id={}, available={}", doctor_id, available)
        return saved

    def delete_doctor(self, doctor_id: str) -> None:
        validation.require_id_format(doctor_id, "Doctor ID")
        if not self._repository.exists_by_id(doctor_id):
            raise DoctorNotFoundError(doctor_id)
        self._repository.delete_by_id(doctor_id)
        logger.info("Doctor deleted: id={}", doctor_id)

    def doctor_exists(self, doctor_id: str | None) -> bool:
        """Never raises: a missing or blank id simply does not exist."""
        if doctor_id is None or not doctor_id.strip():
            return False
        return self._repository.exists_by_id(doctor_id)

    def get_total_doctor_count(self) -> int:
        return self._repository.count()


def _validate_doctor(doctor: Doctor) -> None:
    validation.require_not_none(doctor, "Doctor")
    validation.require_not_empty(doctor.first_name, "First name")
    validation.require_not_empty(doctor.last_name, "Last name")
    validation.require_not_empty(doctor.specialization, "Specialization")
    validation.require_phone_number(doctor.phone_number)
    validation.require_email(doctor.email)
    validation.require_non_negative(doctor.years_of_experience, "Years of experience")
    validation.require_not_empty(doctor.qualification, "Qualification")
