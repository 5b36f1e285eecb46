from __future__ import annotations

import logging
from typing import Any, Dict, List

from flask import (
    Blueprint,
    Response,
    current_app,
    jsonify,
    redirect,
    render_template,
    request,
    url_for,
)
from flask.typing import ResponseReturnValue

from .errors import StoreError, error_payload
from .forms import FruitInput
from .views import render_lookup, to_lookup

main_bp = Blueprint('main', __name__)
fruits_bp = Blueprint('fruits', __name__, url_prefix='/fruits')

logger = logging.getLogger(__name__)

SEED_FRUITS: List[Dict[str, Any]] = [
    {'name': 'Orange', 'color': 'orange', 'ready_to_eat': False},
    {'name': 'Grape', 'color': 'purple', 'ready_to_eat': False},
    {'name': 'Banana', 'color': 'orange', 'ready_to_eat': False},
    {'name': 'Strawberry', 'color': 'red', 'ready_to_eat': False},
    {'name': 'Coconut', 'color': 'brown', 'ready_to_eat': False},
]


def _store_error(exc: StoreError) -> Response:
    return jsonify(error_payload(exc))


def _back_to_index() -> Response:
    return redirect(url_for('fruits.index'))


@main_bp.route('/')
def home() -> Response:
    return Response('your server is running.. better catch it', mimetype='text/plain')


@fruits_bp.route('/seed')
def seed() -> Response:
    """Replace the whole collection with the starter fruits."""

    try:
        fruits = current_app.fruit_store.reset(SEED_FRUITS)
    except StoreError as exc:
        return _store_error(exc)
    return jsonify([fruit.to_dict() for fruit in fruits])


@fruits_bp.route('', methods=['GET'])
def index() -> ResponseReturnValue:
    try:
        fruits = current_app.fruit_store.find_all()
    except StoreError as exc:
        return _store_error(exc)
    return render_template('fruits/index.html', fruits=fruits)


@fruits_bp.route('/new')
def new() -> str:
    return render_template('fruits/new.html')


@fruits_bp.route('', methods=['POST'])
def create() -> Response:
    payload = FruitInput.from_form(request.form)
    try:
        current_app.fruit_store.create(payload.to_fields())
    except StoreError as exc:
        return _store_error(exc)
    return _back_to_index()


@fruits_bp.route('/<fruit_id>/edit')
def edit(fruit_id: str) -> ResponseReturnValue:
    try:
        fruit = current_app.fruit_store.find_by_id(fruit_id)
    except StoreError as exc:
        return _store_error(exc)
    return render_lookup(to_lookup(fruit_id, fruit), 'fruits/edit.html')


@fruits_bp.route('/<fruit_id>', methods=['PUT', 'PATCH'])
def update(fruit_id: str) -> Response:
    payload = FruitInput.from_form(request.form)
    try:
        fruit = current_app.fruit_store.update_by_id(fruit_id, payload.to_fields())
    except StoreError as exc:
        return _store_error(exc)
    if fruit is None:
        logger.info('fruits.update.no_match', extra={'fruit_id': fruit_id})
    return _back_to_index()


@fruits_bp.route('/<fruit_id>', methods=['DELETE'])
def destroy(fruit_id: str) -> Response:
    try:
        fruit = current_app.fruit_store.delete_by_id(fruit_id)
    except StoreError as exc:
        return _store_error(exc)
    if fruit is None:
        logger.info('fruits.delete.no_match', extra={'fruit_id': fruit_id})
    return _back_to_index()


@fruits_bp.route('/<fruit_id>', methods=['GET'])
def show(fruit_id: str) -> ResponseReturnValue:
    try:
        fruit = current_app.fruit_store.find_by_id(fruit_id)
    except StoreError as exc:
        return _store_error(exc)
    return render_lookup(to_lookup(fruit_id, fruit), 'fruits/show.html')
