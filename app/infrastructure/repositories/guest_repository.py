"""Persistence layer for guest sessions."""

from __future__ import annotations

from sqlalchemy.orm import Session

from app.domain.entities import Guest
from app.infrastructure.models import GuestModel
from app.utils import ensure_app_timezone


class GuestRepository:
    """Create and look up guest sessions."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_session_id(self, session_id: str) -> Guest | None:
        model = (
            self.session.query(GuestModel)
            .filter(GuestModel.session_id == session_id)
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, guest: Guest) -> Guest:
        model = GuestModel(name=guest.name, session_id=guest.session_id)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: GuestModel) -> Guest:
        return Guest(
            id=model.id,
            name=model.name,
            session_id=model.session_id,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["GuestRepository"]
