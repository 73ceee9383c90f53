import datetime as dt
from dataclasses import dataclass

from loguru import logger

from clinic.config import AppConfig
from clinic.domain.datetime_helpers import now
from clinic.domain.models import Doctor, Patient
from clinic.records.adapters.id_generators import random_id
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
from clinic.records.ports import Clock, IdGenerator
from clinic.records.prescriptions import PrescriptionService

SAMPLE_DOCTORS = (
    Doctor(
        doctor_id="DOC001",
        first_name="John",
        last_name="Smith",
        specialization="Cardiology",
        phone_number="9876543210",
        email="john.smith@hospital.com",
        years_of_experience=15,
        qualification="MBBS, MD",
    ),
    Doctor(
        doctor_id="DOC002",
        first_name="Sarah",
        last_name="Johnson",
        specialization="Pediatrics",
        phone_number="9876543211",
        email="sarah.johnson@hospital.com",
        years_of_experience=10,
        qualification="MBBS, DCH",
    ),
    Doctor(
        doctor_id="DOC003",
        first_name="Michael",
        last_name="Brown",
        specialization="Orthopedics",
        phone_number="9876543212",
        email="michael.brown@hospital.com",
        years_of_experience=12,
        qualification="MBBS, MS",
    ),
)

SAMPLE_PATIENTS = (
    Patient(
        patient_id="PAT001",
        first_name="Alice",
        last_name="Williams",
        date_of_birth=dt.date(1990, 5, 15),
        gender="Female",
        phone_number="9123456780",
        email="alice.w@email.com",
        address="123 Main St, City",
        blood_group="A+",
    ),
    Patient(
        patient_id="PAT002",
        first_name="Bob",
        last_name="Davis",
        date_of_birth=dt.date(1985, 8, 20),
        gender="Male",
        phone_number="9123456781",
        email="bob.d@email.com",
        address="456 Oak Ave, Town",
        blood_group="O+",
    ),
    Patient(
        patient_id="PAT003",
        first_name="Charlie",
        last_name="Miller",
        date_of_birth=dt.date(2010, 3, 10),
        gender="Male",
        phone_number="9123456782",
        email="charlie.m@email.com",
        address="789 Pine Rd, Village",
        blood_group="B+",
    ),
)


@dataclass(frozen=True)
class Clinic:
    """The five records services, wired to a shared set of stores."""

    patients: PatientService
    doctors: DoctorService
    appointments: AppointmentService
    prescriptions: PrescriptionService
    medical_records: MedicalRecordService


def build_clinic(
    config: AppConfig, id_generator: IdGenerator = random_id, clock: Clock = now
) -> Clinic:
    """Build the services on fresh in-memory stores, seeding sample data if configured."""
    patients = PatientService(InMemoryPatientRepository(), id_generator, clock)
    doctors = DoctorService(InMemoryDoctorRepository(), id_generator)
    clinic = Clinic(
        patients=patients,
        doctors=doctors,
        appointments=AppointmentService(
            InMemoryAppointmentRepository(), patients, doctors, id_generator, clock
        ),
        prescriptions=PrescriptionService(
            InMemoryPrescriptionRepository(), patients, doctors, id_generator, clock
        ),
        medical_records=MedicalRecordService(
            InMemoryMedicalRecordRepository(), patients, doctors, id_generator, clock
        ),
    )

    if config.load_sample_data:
        load_sample_data(clinic)

    return clinic


def load_sample_data(clinic: Clinic) -> None:
    for doctor in SAMPLE_DOCTORS:
        clinic.doctors.register_doctor(doctor)
    for patient in SAMPLE_PATIENTS:
        clinic.patients.register_patient(patient)
    logger.info(
        "Sample data loaded: {} doctor(s), {} patient(s)",
        len(SAMPLE_DOCTORS),
        len(SAMPLE_PATIENTS),
    )
