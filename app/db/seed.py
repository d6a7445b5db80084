"""Seed the directory with sample employees.

Run with ``python -m app.db.seed``.
"""

import logging

from sqlalchemy.orm import Session

from app.db.database import SessionLocal, init_db
from app.db.models import Employee

logger = logging.getLogger(__name__)

SAMPLE_EMPLOYEES = [
    {"name": "Avery Cole", "employee_number": "000123"},
    {"name": "Jordan Blake", "employee_number": "000124"},
    {"name": "Riley Quinn", "employee_number": "000125"},
]


def seed_employees(db: Session) -> int:
    """Insert the sample employees, skipping numbers that already exist.

    Args:
        db: Database session.

    Returns:
        int: Number of employees inserted.
    """
    existing = {
        number
        for (number,) in db.query(Employee.employee_number).filter(
            Employee.employee_number.in_([e["employee_number"] for e in SAMPLE_EMPLOYEES])
        )
    }
    inserted = 0
    for data in SAMPLE_EMPLOYEES:
        if data["employee_number"] in existing:
            continue
        db.add(Employee(**data))
        inserted += 1
    db.commit()
    return inserted


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    init_db()
    db = SessionLocal()
    try:
        count = seed_employees(db)
    finally:
        db.close()
    logger.info("Seed complete: %d employee(s) added", count)


if __name__ == "__main__":
    main()
