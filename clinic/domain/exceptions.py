class ClinicError(Exception):
    """Base exception for all clinic record errors."""


class InvalidDataError(ClinicError):
    """Raised when input fails validation, a referential check or a transition guard."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DuplicateIdError(InvalidDataError):
    """Raised when registering an entity whose id is already stored."""

    def __init__(self, entity: str, entity_id: str) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with ID {entity_id} already exists")


class EntityNotFoundError(ClinicError):
    """Raised when a well-formed id is not present in storage."""

    entity = "Entity"

    def __init__(self, entity_id: str) -> None:
        self.entity_id = entity_id
        super().__init__(f"{self.entity} not found with ID: {entity_id}")


class PatientNotFoundError(EntityNotFoundError):
    entity = "Patient"


class DoctorNotFoundError(EntityNotFoundError):
    entity = "Doctor"


class AppointmentNotFoundError(EntityNotFoundError):
    entity = "Appointment"


class PrescriptionNotFoundError(EntityNotFoundError):
    entity = "Prescription"


class MedicalRecordNotFoundError(EntityNotFoundError):
    entity = "Medical record"
