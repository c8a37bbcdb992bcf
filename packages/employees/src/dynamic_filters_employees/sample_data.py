"""Sample employee generator."""

from __future__ import annotations

import datetime
import random

from .fields import CITIES, DEPARTMENTS, ROLES, SKILLS, STATES
from .models import Address, Employee

FIRST_NAMES = (
    "John", "Jane", "Michael", "Emily", "David", "Sarah", "James", "Jessica",
    "Robert", "Ashley", "William", "Amanda", "Richard", "Melissa", "Joseph",
    "Deborah", "Thomas", "Michelle", "Charles", "Laura", "Christopher", "Kimberly",
    "Daniel", "Amy", "Matthew", "Angela", "Anthony", "Sharon", "Mark", "Lisa",
)  # fmt: skip

LAST_NAMES = (
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis",
    "Rodriguez", "Martinez", "Hernandez", "Lopez", "Wilson", "Anderson", "Thomas",
    "Taylor", "Moore", "Jackson", "Martin", "Lee", "Thompson", "White", "Harris",
)  # fmt: skip

EMAIL_DOMAINS = ("company.com", "techcorp.com", "startup.io", "enterprise.com")

JOIN_DATE_START = datetime.date(2018, 1, 1)
JOIN_DATE_END = datetime.date(2024, 12, 31)


def _random_date(
    rng: random.Random, start: datetime.date, end: datetime.date
) -> datetime.date:
    span = max((end - start).days, 0)
    return start + datetime.timedelta(days=rng.randint(0, span))


def generate_employee(
    employee_id: int,
    rng: random.Random,
    reference_date: datetime.date,
) -> Employee:
    first_name = rng.choice(FIRST_NAMES)
    last_name = rng.choice(LAST_NAMES)
    join_date = _random_date(rng, JOIN_DATE_START, JOIN_DATE_END)
    last_review = _random_date(rng, join_date, max(join_date, reference_date))

    return Employee(
        id=employee_id,
        name=f"{first_name} {last_name}",
        email=f"{first_name.lower()}.{last_name.lower()}@{rng.choice(EMAIL_DOMAINS)}",
        department=rng.choice(DEPARTMENTS),
        role=rng.choice(ROLES),
        salary=round(rng.randint(50000, 150000) / 1000) * 1000,
        join_date=join_date,
        is_active=rng.random() > 0.15,
        skills=tuple(rng.sample(SKILLS, rng.randint(2, 5))),
        address=Address(city=rng.choice(CITIES), state=rng.choice(STATES)),
        projects=rng.randint(0, 10),
        last_review=last_review,
        performance_rating=round(rng.uniform(1.0, 5.0), 1),
    )


def generate_sample_data(
    count: int = 50,
    *,
    seed: int | None = None,
    reference_date: datetime.date | None = None,
) -> list[Employee]:
    """
    Generate *count* employees with ids ``1..count``.

    The same *seed* and *reference_date* always produce the same records.
    """
    rng = random.Random(seed)
    today = reference_date or datetime.date.today()
    return [generate_employee(i + 1, rng, today) for i in range(count)]
