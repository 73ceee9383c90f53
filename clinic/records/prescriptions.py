from loguru import logger

from clinic.domain import validation
from clinic.domain.datetime_helpers import now
from clinic.domain.exceptions import InvalidDataError, PrescriptionNotFoundError
from clinic.domain.models import Medication, Prescription
from clinic.records.adapters.id_generators import random_id
from clinic.records.doctors import DoctorService
from clinic.records.patients import PatientService
from clinic.records.ports import Clock, IdGenerator, PrescriptionRepository

ID_PREFIX = "PRE"


class PrescriptionService:
    """Writes prescriptions, appends medications and tracks validity.

    ``appointment_id`` on a prescription is informational and is not checked
    against stored appointments.
    """

    def __init__(
        self,
        repository: PrescriptionRepository,
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

    def create_prescription(self, prescription: Prescription) -> Prescription:
        """Validate and store a new prescription.

        A prescription without a date is dated today according to the clock,
        so its validity window follows the same time source as
        ``get_valid_prescriptions``.

        Raises:
            InvalidDataError: A field is invalid or the patient or doctor does
                not exist.
        """
        _validate_prescription(prescription)

        if not self._patients.patient_exists(prescription.patient_id):
            logger.warning("Prescription refers to unknown patient {}", prescription.patient_id)
            raise InvalidDataError(f"Patient not found with ID: {prescription.patient_id}")
        if not self._doctors.doctor_exists(prescription.doctor_id):
            logger.warning("Prescription refers to unknown doctor {}", prescription.doctor_id)
            raise InvalidDataError(f"Doctor not found with ID: {prescription.doctor_id}")

        prescription_id = prescription.prescription_id
        if prescription_id is None or not prescription_id.strip():
            prescription_id = self._new_id(ID_PREFIX)
            logger.debug("Generated prescription id {}", prescription_id)
        else:
            prescription_id = prescription_id.strip()

        saved = self._repository.save(
            prescription.model_copy(
                update={
                    "prescription_id": prescription_id,
                    "prescription_date": prescription.prescription_date or self._clock().date(),
                }
            )
        )
        logger.info("Prescription created: id={}, expires={}", prescription_id, saved.expiry_date)
        return saved

    def get_prescription_by_id(self, prescription_id: str) -> Prescription:
        validation.require_id_format(prescription_id, "Prescription ID")
        prescription = self._repository.find_by_id(prescription_id)
        if prescription is None:
            raise PrescriptionNotFoundError(prescription_id)
        return prescription

    def get_all_prescriptions(self) -> list[Prescription]:
        return self._repository.find_all()

    def get_prescriptions_by_patient(self, patient_id: str) -> list[Prescription]:
        validation.require_not_empty(patient_id, "Patient ID")
        return self._repository.find_by_patient_id(patient_id)

    def get_prescriptions_by_doctor(self, doctor_id: str) -> list[Prescription]:
        validation.require_not_empty(doctor_id, "Doctor ID")
        return self._repository.find_by_doctor_id(doctor_id)

    def get_valid_prescriptions(self) -> list[Prescription]:
        """Prescriptions whose validity window still covers today's date."""
        today = self._clock().date()
        return [p for p in self._repository.find_all() if p.is_valid_on(today)]

    def add_medication(self, prescription_id: str, medication: Medication) -> Prescription:
        """Append a medication after the ones already on the prescription."""
        prescription = self.get_prescription_by_id(prescription_id)
        _validate_medication(medication)

        saved = self._repository.save(
            prescription.model_copy(
                update={"medications": (*prescription.medications, medication)}
            )
        )
        logger.info(
            "Medication added: prescription={}, count={}", prescription_id, len(saved.medications)
        )
        return saved

    def delete_prescription(self, prescription_id: str) -> None:
        validation.require_id_format(prescription_id, "Prescription ID")
        if not self._repository.exists_by_id(prescription_id):
            raise PrescriptionNotFoundError(prescription_id)
        self._repository.delete_by_id(prescription_id)
        logger.info("Prescription deleted: id={}", prescription_id)

    def get_total_prescription_count(self) -> int:
        return self._repository.count()


def _validate_prescription(prescription: Prescription) -> None:
    validation.require_not_none(prescription, "Prescription")
    validation.require_not_empty(prescription.patient_id, "Patient ID")
    validation.require_not_empty(prescription.doctor_id, "Doctor ID")
    validation.require_not_empty(prescription.diagnosis, "Diagnosis")
    validation.require_positive(prescription.validity_days, "Validity days")


def _validate_medication(medication: Medication) -> None:
    validation.require_not_none(medication, "Medication")
    validation.require_not_empty(medication.medicine_name, "Medicine name")
    validation.require_not_empty(medication.dosage, "Dosage")
    validation.require_not_empty(medication.frequency, "Frequency")
    validation.require_positive(medication.duration_days, "Duration days")
