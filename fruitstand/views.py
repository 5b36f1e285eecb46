"""Rendering contract for single-record lookups.

A lookup either found the record or did not. ``Found`` renders the requested
template with the record under ``fruit``; ``NotFound`` answers with the same
JSON error payload used for store failures, so templates never receive a
missing record.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from flask import jsonify, render_template
from flask.typing import ResponseReturnValue


@dataclass(frozen=True)
class Found:
    record: Any


@dataclass(frozen=True)
class NotFound:
    fruit_id: str

    def as_error(self) -> Dict[str, Any]:
        return {
            'error': {
                'name': 'NotFound',
                'message': f'No fruit found with id "{self.fruit_id}"',
            }
        }


Lookup = Union[Found, NotFound]


def to_lookup(fruit_id: str, record: Optional[Any]) -> Lookup:
    if record is None:
        return NotFound(fruit_id)
    return Found(record)


def render_lookup(result: Lookup, template: str) -> ResponseReturnValue:
    if isinstance(result, Found):
        return render_template(template, fruit=result.record)
    return jsonify(result.as_error())
