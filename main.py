import sys

from loguru import logger

from clinic.config import AppConfig
from clinic.records.factory import build_clinic


def main() -> None:
    config = AppConfig()
    logger.remove()
    logger.add(sys.stderr, level=config.log_level)

    logger.info("Starting clinic records manager")
    clinic = build_clinic(config)

    logger.info(
        "Ready: {} patient(s), {} doctor(s), {} available",
        clinic.patients.get_total_patient_count(),
        clinic.doctors.get_total_doctor_count(),
        len(clinic.doctors.get_available_doctors()),
    )


if __name__ == "__main__":
    main()
