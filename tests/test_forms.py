from __future__ import annotations

import pytest
from werkzeug.datastructures import MultiDict

from fruitstand.forms import FruitInput, coerce_checkbox


@pytest.mark.parametrize(
    "value, expected",
    [
        ("on", True),
        ("On", False),
        ("true", False),
        ("1", False),
        ("", False),
        (None, False),
        (True, False),
    ],
)
def test_checkbox_is_true_only_for_on(value, expected):
    assert coerce_checkbox(value) is expected


def test_from_form_reads_known_fields_only():
    form = MultiDict(
        [("name", "Kiwi"), ("color", "green"), ("readyToEat", "on"), ("_method", "PUT"), ("id", "x")]
    )

    payload = FruitInput.from_form(form)

    assert payload == FruitInput(name="Kiwi", color="green", ready_to_eat=True)
    assert payload.to_fields() == {"name": "Kiwi", "color": "green", "ready_to_eat": True}


def test_missing_fields_become_none_and_false():
    payload = FruitInput.from_form(MultiDict())

    assert payload.to_fields() == {"name": None, "color": None, "ready_to_eat": False}


def test_multi_valued_fields_use_first_value():
    form = MultiDict([("name", "First"), ("name", "Second"), ("readyToEat", "on"), ("readyToEat", "off")])
    assert FruitInput.from_form(form).name == "First"
    assert FruitInput.from_form(form).ready_to_eat is True

    plain = {"name": ["Listed", "Other"], "color": 7, "readyToEat": []}
    payload = FruitInput.from_form(plain)
    assert payload.name == "Listed"
    assert payload.color == "7"
    assert payload.ready_to_eat is False
