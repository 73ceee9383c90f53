import datetime as dt
from typing import Callable, Generic, TypeVar

from pydantic import BaseModel

from clinic.domain.models import (
    Appointment,
    AppointmentStatus,
    Doctor,
    MedicalRecord,
    Patient,
    Prescription,
)

EntityT = TypeVar("EntityT", bound=BaseModel)


class _InMemoryStore(Generic[EntityT]):
    """Dict-backed store keyed by one id attribute of a frozen model.

    Stored entities are immutable, so handing them out never lets a caller
    change what is stored; updates always go back through ``save``.
    """

    def __init__(self, key: Callable[[EntityT], str | None]) -> None:
        self._key = key
        self._items: dict[str, EntityT] = {}

    def save(self, entity: EntityT) -> EntityT:
        entity_id = self._key(entity)
        if not entity_id:
            raise ValueError("Cannot store an entity without an id")
        self._items[entity_id] = entity
        return entity

    def find_by_id(self, entity_id: str) -> EntityT | None:
        return self._items.get(entity_id)

    def find_all(self) -> list[EntityT]:
        return list(self._items.values())

    def exists_by_id(self, entity_id: str) -> bool:
        return entity_id in self._items

    def delete_by_id(self, entity_id: str) -> None:
        self._items.pop(entity_id, None)

    def count(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()

    def _filter(self, predicate: Callable[[EntityT], bool]) -> list[EntityT]:
        return [item for item in self._items.values() if predicate(item)]


class InMemoryPatientRepository(_InMemoryStore[Patient]):
    def __init__(self) -> None:
        super().__init__(key=lambda p: p.patient_id)

    def find_by_last_name(self, last_name: str) -> list[Patient]:
        return self._filter(lambda p: p.last_name.lower() == last_name.lower())

    def find_by_blood_group(self, blood_group: str) -> list[Patient]:
        return self._filter(lambda p: p.blood_group.lower() == blood_group.lower())


class InMemoryDoctorRepository(_InMemoryStore[Doctor]):
    def __init__(self) -> None:
        super().__init__(key=lambda d: d.doctor_id)

    def find_by_specialization(self, specialization: str) -> list[Doctor]:
        return self._filter(lambda d: d.specialization.lower() == specialization.lower())

    def find_available(self) -> list[Doctor]:
        return self._filter(lambda d: d.is_available)


class InMemoryAppointmentRepository(_InMemoryStore[Appointment]):
    def __init__(self) -> None:
        super().__init__(key=lambda a: a.appointment_id)

    def find_by_patient_id(self, patient_id: str) -> list[Appointment]:
        return self._filter(lambda a: a.patient_id == patient_id)

    def find_by_doctor_id(self, doctor_id: str) -> list[Appointment]:
        return self._filter(lambda a: a.doctor_id == doctor_id)

    def find_by_status(self, status: AppointmentStatus) -> list[Appointment]:
        return self._filter(lambda a: a.status == status)

    def find_by_date(self, date: dt.date) -> list[Appointment]:
        return self._filter(
            lambda a: a.appointment_datetime is not None
            and a.appointment_datetime.date() == date
        )


class InMemoryPrescriptionRepository(_InMemoryStore[Prescription]):
    def __init__(self) -> None:
        super().__init__(key=lambda p: p.prescription_id)

    def find_by_patient_id(self, patient_id: str) -> list[Prescription]:
        return self._filter(lambda p: p.patient_id == patient_id)

    def find_by_doctor_id(self, doctor_id: str) -> list[Prescription]:
        return self._filter(lambda p: p.doctor_id == doctor_id)


class InMemoryMedicalRecordRepository(_InMemoryStore[MedicalRecord]):
    def __init__(self) -> None:
        super().__init__(key=lambda r: r.record_id)

    def find_by_patient_id(self, patient_id: str) -> list[MedicalRecord]:
        records = self._filter(lambda r: r.patient_id == patient_id)
        return sorted(records, key=lambda r: r.record_datetime or dt.datetime.min, reverse=True)

    def find_by_doctor_id(self, doctor_id: str) -> list[MedicalRecord]:
        return self._filter(lambda r: r.doctor_id == doctor_id)

    def find_by_appointment_id(self, appointment_id: str) -> MedicalRecord | None:
        for record in self._items.values():
            if record.appointment_id == appointment_id:
                return record
        return None
