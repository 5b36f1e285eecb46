from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from ..errors import StoreError
from ..models import Fruit

logger = logging.getLogger(__name__)

_ID_PATTERN = re.compile(r'^[0-9a-f]{32}$')

FRUIT_FIELDS = ('name', 'color', 'ready_to_eat')


def _parse_id(raw: Any) -> str:
    value = str(raw).strip().lower() if raw is not None else ''
    if not _ID_PATTERN.match(value):
        raise StoreError(
            'CastError',
            f'Cast to id failed for value "{raw}" at path "id" for model "Fruit"',
        )
    return value


def _clean_fields(fields: Mapping[str, Any]) -> Dict[str, Any]:
    cleaned = {key: fields.get(key) for key in FRUIT_FIELDS}
    cleaned['ready_to_eat'] = bool(cleaned['ready_to_eat'])
    return cleaned


class FruitStore:
    """Record store for fruit documents backed by SQLAlchemy.

    Every public method issues its work inside :meth:`_guard`, so callers only
    ever see :class:`~fruitstand.errors.StoreError` on failure.
    """

    def __init__(self, database: SQLAlchemy) -> None:
        self._db = database

    @property
    def _session(self):
        return self._db.session

    @contextmanager
    def _guard(self, operation: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            self._session.rollback()
            logger.warning('fruit_store.query_failed', exc_info=True, extra={'operation': operation})
            raise StoreError(type(exc).__name__, str(exc)) from exc

    def find_all(self) -> List[Fruit]:
        with self._guard('find_all'):
            return list(self._session.execute(select(Fruit).order_by(Fruit.created_at)).scalars())

    def find_by_id(self, fruit_id: Any) -> Optional[Fruit]:
        key = _parse_id(fruit_id)
        with self._guard('find_by_id'):
            return self._session.get(Fruit, key)

    def create(self, fields: Mapping[str, Any]) -> Fruit:
        with self._guard('create'):
            fruit = Fruit(**_clean_fields(fields))
            self._session.add(fruit)
            self._session.commit()
            return fruit

    def create_many(self, records: Iterable[Mapping[str, Any]]) -> List[Fruit]:
        with self._guard('create_many'):
            fruits = [Fruit(**_clean_fields(record)) for record in records]
            self._session.add_all(fruits)
            self._session.commit()
            return fruits

    def update_by_id(self, fruit_id: Any, fields: Mapping[str, Any]) -> Optional[Fruit]:
        """Replace every field of the matching record; ``None`` when nothing matches."""

        key = _parse_id(fruit_id)
        with self._guard('update_by_id'):
            fruit = self._session.get(Fruit, key)
            if fruit is None:
                return None
            for name, value in _clean_fields(fields).items():
                setattr(fruit, name, value)
            self._session.commit()
            return fruit

    def delete_by_id(self, fruit_id: Any) -> Optional[Fruit]:
        key = _parse_id(fruit_id)
        with self._guard('delete_by_id'):
            fruit = self._session.get(Fruit, key)
            if fruit is None:
                return None
            self._session.delete(fruit)
            self._session.commit()
            return fruit

    def delete_all(self) -> int:
        with self._guard('delete_all'):
            result = self._session.execute(delete(Fruit))
            self._session.commit()
            return result.rowcount or 0

    def reset(self, records: Iterable[Mapping[str, Any]]) -> List[Fruit]:
        """Delete every record and insert ``records`` in a single transaction.

        A failed insert rolls back the delete, leaving the previous records in
        place.
        """

        with self._guard('reset'):
            removed = self._session.execute(delete(Fruit)).rowcount or 0
            fruits = [Fruit(**_clean_fields(record)) for record in records]
            self._session.add_all(fruits)
            self._session.commit()
        logger.info('Reset fruit collection: removed %s, inserted %s', removed, len(fruits))
        return fruits
