from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.models.hr import Employee, Gender

logger = logging.getLogger(__name__)


def init_db(seed: bool = False) -> None:
    """
    Create tables and, when asked, insert a handful of demo employees.

    Seeding only happens into an empty table, so restarting with
    `APP_SEED_DEMO_DATA=true` never duplicates rows.
    """

    Base.metadata.create_all(bind=engine)

    if not seed:
        return

    with SessionLocal() as db:
        if _has_seed_data(db):
            return
        _seed(db)
        logger.info("Seeded demo employees")


def _has_seed_data(db: Session) -> bool:
    return db.execute(select(Employee.id).limit(1)).first() is not None


def _seed(db: Session) -> None:
    db.add_all(
        [
            Employee(
                firstname="Ada",
                lastname="Lovelace",
                gender=Gender.FEMALE,
                birthday=date(1815, 12, 10),
                monthly_salary=Decimal("1000.00"),
            ),
            Employee(
                firstname="Alan",
                lastname="Turing",
                gender=Gender.MALE,
                birthday=date(1912, 6, 23),
                monthly_salary=Decimal("1200.00"),
            ),
            Employee(
                firstname="Sam",
                lastname="Rivera",
                gender=Gender.NON_BINARY,
                birthday=date(1990, 3, 14),
                monthly_salary=Decimal("950.50"),
            ),
        ]
    )
    db.commit()
