"""Parsing of submitted fruit forms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

CHECKBOX_ON = 'on'


def coerce_checkbox(value: Any) -> bool:
    """Return ``True`` only when an HTML checkbox submitted exactly ``"on"``."""

    return value == CHECKBOX_ON


def _first(form: Mapping[str, Any], key: str) -> Optional[str]:
    # Werkzeug MultiDict.get already yields the first value; plain dicts may
    # carry lists when built by hand.
    value = form.get(key)
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


@dataclass
class FruitInput:
    """Typed create/update payload built from an untyped form body."""

    name: Optional[str]
    color: Optional[str]
    ready_to_eat: bool = False

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> 'FruitInput':
        """Read the three known fields; anything else in ``form`` is ignored."""

        return cls(
            name=_first(form, 'name'),
            color=_first(form, 'color'),
            ready_to_eat=coerce_checkbox(_first(form, 'readyToEat')),
        )

    def to_fields(self) -> Dict[str, Any]:
        """Full replacement field set for the store."""

        return {
            'name': self.name,
            'color': self.color,
            'ready_to_eat': self.ready_to_eat,
        }
