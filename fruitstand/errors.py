"""Error types and the JSON error payload shared by the fruit handlers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class StoreError(Exception):
    """Raised when the record store cannot complete a query.

    ``kind`` names the failure (``"CastError"`` for malformed identifiers, the
    underlying SQLAlchemy exception class otherwise).
    """

    kind: str
    message: str

    def __str__(self) -> str:  # pragma: no cover - dataclass convenience
        return self.message


def serialize_error(exc: BaseException) -> Dict[str, Any]:
    """Return the ``{name, message}`` object placed under ``error`` in responses."""

    if isinstance(exc, StoreError):
        return {'name': exc.kind, 'message': exc.message}
    return {'name': type(exc).__name__, 'message': str(exc)}


def error_payload(exc: BaseException) -> Dict[str, Any]:
    return {'error': serialize_error(exc)}
