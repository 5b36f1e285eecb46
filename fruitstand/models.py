"""Database models for Fruitstand."""

from __future__ import annotations

from typing import Any, Dict
from uuid import uuid4

from sqlalchemy.sql import func

from .extensions import db


def _new_id() -> str:
    return uuid4().hex


class Fruit(db.Model):
    """A single fruit document.

    ``id`` is assigned once at insert time and never rewritten; updates replace
    the remaining fields wholesale.
    """

    __tablename__ = "fruits"

    id = db.Column(db.String(32), primary_key=True, default=_new_id)
    name = db.Column(db.String(255), nullable=True)
    color = db.Column(db.String(255), nullable=True)
    ready_to_eat = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(
        db.DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at = db.Column(
        db.DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def to_dict(self) -> Dict[str, Any]:
        """Return the public record shape used in JSON responses."""

        return {
            "id": self.id,
            "name": self.name,
            "color": self.color,
            "readyToEat": bool(self.ready_to_eat),
        }

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<Fruit {self.id} {self.name!r}>"
