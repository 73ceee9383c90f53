import datetime as dt

import pytest

from clinic.domain.models import Appointment, Doctor, Patient
from clinic.records.adapters.fake import FakeClock
from clinic.records.adapters.id_generators import SequentialIdGenerator
from clinic.records.adapters.memory import (
    InMemoryAppointmentRepository,
    InMemoryDoctorRepository,
    InMemoryMedicalRecordRepository,
    InMemoryPatientRepository,
    InMemoryPrescriptionRepository,
)
from clinic.records.appointments import AppointmentService
from clinic.records.doctors import DoctorService
from clinic.records.medical_records import MedicalRecordService
from clinic.records.patients import PatientService
from clinic.records.prescriptions import PrescriptionService

NOW = dt.datetime(2026, 6, 15, 10, 0)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(NOW)


@pytest.fixture
def id_generator() -> SequentialIdGenerator:
    return SequentialIdGenerator()


@pytest.fixture
def patient_repository() -> InMemoryPatientRepository:
    return InMemoryPatientRepository()


@pytest.fixture
def doctor_repository() -> InMemoryDoctorRepository:
    return InMemoryDoctorRepository()


@pytest.fixture
def appointment_repository() -> InMemoryAppointmentRepository:
    return InMemoryAppointmentRepository()


@pytest.fixture
def prescription_repository() -> InMemoryPrescriptionRepository:
    return InMemoryPrescriptionRepository()


@pytest.fixture
def record_repository() -> InMemoryMedicalRecordRepository:
    return InMemoryMedicalRecordRepository()


@pytest.fixture
def patient_service(
    patient_repository: InMemoryPatientRepository,
    id_generator: SequentialIdGenerator,
    clock: FakeClock,
) -> PatientService:
    return PatientService(patient_repository, id_generator, clock)


@pytest.fixture
def doctor_service(
    doctor_repository: InMemoryDoctorRepository, id_generator: SequentialIdGenerator
) -> DoctorService:
    return DoctorService(doctor_repository, id_generator)


@pytest.fixture
def appointment_service(
    appointment_repository: InMemoryAppointmentRepository,
    patient_service: PatientService,
    doctor_service: DoctorService,
    id_generator: SequentialIdGenerator,
    clock: FakeClock,
) -> AppointmentService:
    return AppointmentService(
        appointment_repository, patient_service, doctor_service, id_generator, clock
    )


@pytest.fixture
def prescription_service(
    prescription_repository: InMemoryPrescriptionRepository,
    patient_service: PatientService,
    doctor_service: DoctorService,
    id_generator: SequentialIdGenerator,
    clock: FakeClock,
) -> PrescriptionService:
    return PrescriptionService(
        prescription_repository, patient_service, doctor_service, id_generator, clock
    )


@pytest.fixture
def record_service(
    record_repository: InMemoryMedicalRecordRepository,
    patient_service: PatientService,
    doctor_service: DoctorService,
    id_generator: SequentialIdGenerator,
    clock: FakeClock,
) -> MedicalRecordService:
    return MedicalRecordService(
        record_repository, patient_service, doctor_service, id_generator, clock
    )


@pytest.fixture
def new_patient() -> Patient:
    return Patient(
        first_name="John",
        last_name="Doe",
        date_of_birth=dt.date(1990, 1, 1),
        gender="Male",
        phone_number="9876543210",
        email="john@example.com",
        address="123 Main St",
        blood_group="A+",
    )


@pytest.fixture
def new_doctor() -> Doctor:
    return Doctor(
        first_name="Jane",
        last_name="Smith",
        specialization="Cardiology",
        phone_number="9876543211",
        email="jane@hospital.com",
        years_of_experience=10,
        qualification="MBBS, MD",
    )


@pytest.fixture
def patient(patient_service: PatientService, new_patient: Patient) -> Patient:
    return patient_service.register_patient(new_patient)


@pytest.fixture
def doctor(doctor_service: DoctorService, new_doctor: Doctor) -> Doctor:
    return doctor_service.register_doctor(new_doctor)


@pytest.fixture
def new_appointment(patient: Patient, doctor: Doctor) -> Appointment:
    return Appointment(
        patient_id=patient.patient_id or "",
        doctor_id=doctor.doctor_id or "",
        appointment_datetime=NOW + dt.timedelta(days=1),
        reason="Regular checkup",
    )
