import datetime as dt

from loguru import logger

from clinic.domain import validation
from clinic.domain.datetime_helpers import is_future_datetime, now
from clinic.domain.exceptions import AppointmentNotFoundError, InvalidDataError
from clinic.domain.models import Appointment, AppointmentStatus
from clinic.records.adapters.id_generators import random_id
from clinic.records.doctors import DoctorService
from clinic.records.patients import PatientService
from clinic.records.ports import AppointmentRepository, Clock, IdGenerator

ID_PREFIX = "APT"

_NOT_RESCHEDULABLE = (AppointmentStatus.COMPLETED, AppointmentStatus.CANCELLED)


class AppointmentService:
    """Books appointments and drives their status.

    Status rules:

    * ``schedule_appointment`` always stores SCHEDULED.
    * ``reschedule_appointment`` refuses COMPLETED and CANCELLED, and puts the
      appointment back to SCHEDULED.
    * ``cancel_appointment`` refuses COMPLETED only; cancelling twice is fine.
    * ``complete_appointment`` and ``update_appointment_status`` have no guard.
    """

    def __init__(
        self,
        repository: AppointmentRepository,
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

    def schedule_appointment(self, appointment: Appointment) -> Appointment:
        """Validate and store a new appointment in SCHEDULED status.

        Raises:
            InvalidDataError: A field is invalid, the patient or doctor does not
                exist, or the date-time is not strictly in the future.
        """
        _validate_appointment(appointment)

        if not self._patients.patient_exists(appointment.patient_id):
            logger.warning("Appointment refers to unknown patient {}", appointment.patient_id)
            raise InvalidDataError(f"Patient not found with ID: {appointment.patient_id}")
        if not self._doctors.doctor_exists(appointment.doctor_id):
            logger.warning("Appointment refers to unknown doctor {}", appointment.doctor_id)
            raise InvalidDataError(f"Doctor not found with ID: {appointment.doctor_id}")
        if not is_future_datetime(appointment.appointment_datetime, self._clock()):
            raise InvalidDataError("Appointment date must be in the future")

        appointment_id = appointment.appointment_id
        if appointment_id is None or not appointment_id.strip():
            appointment_id = self._new_id(ID_PREFIX)
            logger.debug("Generated appointment id {}", appointment_id)
        else:
            appointment_id = appointment_id.strip()

        saved = self._repository.save(
            appointment.model_copy(
                update={"appointment_id": appointment_id, "status": AppointmentStatus.SCHEDULED}
            )
        )
        logger.info(
            "Appointment scheduled: id={}, at={}", appointment_id, saved.appointment_datetime
        )
        return saved

    def get_appointment_by_id(self, appointment_id: str) -> Appointment:
        validation.require_id_format(appointment_id, "Appointment ID")
        appointment = self._repository.find_by_id(appointment_id)
        if appointment is None:
            raise AppointmentNotFoundError(appointment_id)
        return appointment

    def get_all_appointments(self) -> list[Appointment]:
        return self._repository.find_all()

    def get_appointments_by_patient(self, patient_id: str) -> list[Appointment]:
        validation.require_not_empty(patient_id, "Patient ID")
        return self._repository.find_by_patient_id(patient_id)

    def get_appointments_by_doctor(self, doctor_id: str) -> list[Appointment]:
        validation.require_not_empty(doctor_id, "Doctor ID")
        return self._repository.find_by_doctor_id(doctor_id)

    def get_appointments_by_date(self, date: dt.date) -> list[Appointment]:
        validation.require_not_none(date, "Date")
        return self._repository.find_by_date(date)

    def get_appointments_by_status(self, status: AppointmentStatus) -> list[Appointment]:
        validation.require_not_none(status, "Status")
        return self._repository.find_by_status(status)

    def get_upcoming_appointments(self) -> list[Appointment]:
        """SCHEDULED appointments still ahead of the clock, soonest first."""
        current = self._clock()
        upcoming = [a for a in self._repository.find_all() if a.is_upcoming_at(current)]
        logger.debug("Found {} upcoming appointment(s)", len(upcoming))
        return sorted(upcoming, key=lambda a: a.appointment_datetime or current)

    def update_appointment_status(
        self, appointment_id: str, status: AppointmentStatus
    ) -> Appointment:
        """Set any status directly; none of the transition guards apply."""
        appointment = self.get_appointment_by_id(appointment_id)
        validation.require_not_none(status, "Status")
        saved = self._repository.save(appointment.model_copy(update={"status": status}))
        logger.info("Appointment status set: id={}, status={}", appointment_id, status.value)
        return saved

    def reschedule_appointment(
        self, appointment_id: str, new_datetime: dt.datetime
    ) -> Appointment:
        appointment = self.get_appointment_by_id(appointment_id)

        validation.require_naive_datetime(new_datetime, "New appointment date/time")
        if not is_future_datetime(new_datetime, self._clock()):
            raise InvalidDataError("New appointment date must be in the future")
        if appointment.status in _NOT_RESCHEDULABLE:
            logger.warning(
                "Refused to reschedule appointment {} in status {}",
                appointment_id,
                appointment.status.value,
            )
            raise InvalidDataError(f"Cannot reschedule a {appointment.status.value} appointment")

        saved = self._repository.save(
            appointment.model_copy(
                update={
                    "appointment_datetime": new_datetime,
                    "status": AppointmentStatus.SCHEDULED,
                }
            )
        )
        logger.info("Appointment rescheduled: id={}, at={}", appointment_id, new_datetime)
        return saved

    def cancel_appointment(self, appointment_id: str) -> Appointment:
        appointment = self.get_appointment_by_id(appointment_id)

        if appointment.status == AppointmentStatus.COMPLETED:
            logger.warning("Refused to cancel completed appointment {}", appointment_id)
            raise InvalidDataError("Cannot cancel a completed appointment")

        saved = self._repository.save(
            appointment.model_copy(update={"status": AppointmentStatus.CANCELLED})
        )
        logger.info("Appointment cancelled: id={}", appointment_id)
        return saved

    def complete_appointment(self, appointment_id: str) -> Appointment:
        """Mark COMPLETED from any status, including CANCELLED."""
        appointment = self.get_appointment_by_id(appointment_id)
        saved = self._repository.save(
            appointment.model_copy(update={"status": AppointmentStatus.COMPLETED})
        )
        logger.info("Appointment completed: id={}", appointment_id)
        return saved

    def delete_appointment(self, appointment_id: str) -> None:
        validation.require_id_format(appointment_id, "Appointment ID")
        if not self._repository.exists_by_id(appointment_id):
            raise AppointmentNotFoundError(appointment_id)
        self._repository.delete_by_id(appointment_id)
        logger.info("Appointment deleted: id={}", appointment_id)

    def get_total_appointment_count(self) -> int:
        return self._repository.count()


def _validate_appointment(appointment: Appointment) -> None:
    validation.require_not_none(appointment, "Appointment")
    validation.require_not_empty(appointment.patient_id, "Patient ID")
    validation.require_not_empty(appointment.doctor_id, "Doctor ID")
    validation.require_not_none(appointment.appointment_datetime, "Appointment date/time")
    validation.require_naive_datetime(appointment.appointment_datetime, "Appointment date/time")
    validation.require_not_empty(appointment.reason, "Reason")
    validation.require_positive(appointment.duration_minutes, "Duration")
