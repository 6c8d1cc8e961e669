"""Read-only lookup of people who can take custody of assets."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from assettrack.core.exceptions import NotFoundError
from assettrack.models import Person


class PersonDirectory:
    def __init__(self, db: Session) -> None:
        self.db = db

    def resolve(self, person_id: str) -> Person:
        person = self.db.execute(select(Person).where(Person.uuid == person_id)).scalar_one_or_none()
        if person is None:
            raise NotFoundError("Person", person_id)
        return person
