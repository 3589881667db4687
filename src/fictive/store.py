from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import Any, Callable, Dict, List

from fictive.errors import EntityNotArray, EntityNotFound, InvalidEntry

Record = Dict[str, Any]
Predicate = Callable[[Record], Any]

_MISSING = object()


def _copy_row(row: Any) -> Any:
    if isinstance(row, Mapping):
        return dict(row)
    return row


def _key_of(row: Any, primary_key: str) -> Any:
    # строка-не-словарь считается строкой без ключа
    if isinstance(row, Mapping):
        return row.get(primary_key) or 0
    return 0


class FakeDB:
    """
    In-memory storage of named entities for mocked services.

    An entity created from a list behaves like a database table: it supports
    insert / update / delete / search / test_some. Any other initial state is
    stored as is and is only reachable through ``get``.

    Keep one instance per mock data domain and pass it to every mock service.
    """

    def __init__(self):
        self._storage: Dict[str, Any] = {}
        # update/delete = прочитать и заменить целиком, под потоками нужен лок
        self._lock = threading.RLock()

    def __contains__(self, entity_name: str) -> bool:
        with self._lock:
            return entity_name in self._storage

    def names(self) -> List[str]:
        with self._lock:
            return list(self._storage)

    def create(self, entity_name: str, initial_state: Any = _MISSING) -> None:
        """Create (or silently overwrite) an entity. Defaults to an empty table."""
        if initial_state is _MISSING or initial_state is None:
            data: Any = []
        elif isinstance(initial_state, (list, tuple)):
            data = [_copy_row(row) for row in initial_state]
        else:
            data = initial_state

        with self._lock:
            self._storage[entity_name] = data
        logging.debug(
            "fakedb_create",
            extra={
                "event": "fakedb_create",
                "entity": entity_name,
                "rows": len(data) if isinstance(data, list) else None,
            },
        )

    def get(self, entity_name: str) -> Any:
        with self._lock:
            if entity_name not in self._storage:
                raise EntityNotFound(f"Entity “{entity_name}” does not exist.", entity=entity_name)
            data = self._storage[entity_name]
            if isinstance(data, list):
                return [_copy_row(row) for row in data]
            return data

    def insert(self, entity_name: str, entry: Mapping[str, Any], primary_key: str | None = None) -> Any:
        """
        Append a copy of ``entry`` to the table.

        With ``primary_key`` the field is auto-generated as 1 + max of the
        current values (missing values and non-mapping rows count as 0,
        the max never goes below 0) and returned.
        """
        if not isinstance(entry, Mapping):
            raise InvalidEntry("Entry to insert is not a data object.", entity=entity_name)

        with self._lock:
            rows = self._table(entity_name)
            data = dict(entry)
            if primary_key:
                # max только по текущим строкам: удалённый верхний ключ может вернуться
                data[primary_key] = 1 + max([0] + [_key_of(row, primary_key) for row in rows])
            rows.append(data)

        logging.debug(
            "fakedb_insert",
            extra={"event": "fakedb_insert", "entity": entity_name, "primary_key": primary_key},
        )
        if primary_key:
            return data[primary_key]
        return None

    def update(self, entity_name: str, data: Mapping[str, Any], match: Predicate) -> int:
        """Merge ``data`` into every matching row. Returns the number of updated rows."""
        matched = 0
        with self._lock:
            rows = self._table(entity_name)
            updated: List[Record] = []
            for row in rows:
                if match(row):
                    matched += 1
                    updated.append({**(row if isinstance(row, Mapping) else {}), **data})
                else:
                    updated.append(_copy_row(row))
            self._storage[entity_name] = updated

        logging.debug(
            "fakedb_update",
            extra={"event": "fakedb_update", "entity": entity_name, "matched": matched},
        )
        return matched

    def delete(self, entity_name: str, match: Predicate) -> int:
        """Remove every matching row. Returns the number of removed rows."""
        with self._lock:
            rows = self._table(entity_name)
            kept = [row for row in rows if not match(row)]
            self._storage[entity_name] = kept
            removed = len(rows) - len(kept)

        logging.debug(
            "fakedb_delete",
            extra={"event": "fakedb_delete", "entity": entity_name, "removed": removed},
        )
        return removed

    def search(self, entity_name: str, match: Predicate | None = None) -> List[Record]:
        with self._lock:
            rows = self._table(entity_name)
            if match is None:
                return [_copy_row(row) for row in rows]
            return [_copy_row(row) for row in rows if match(row)]

    def test_some(self, entity_name: str, match: Predicate) -> bool:
        with self._lock:
            return any(match(row) for row in self._table(entity_name))

    def _table(self, entity_name: str) -> List[Record]:
        if entity_name not in self._storage:
            raise EntityNotFound(f"Entity “{entity_name}” does not exist.", entity=entity_name)
        rows = self._storage[entity_name]
        if not isinstance(rows, list):
            raise EntityNotArray(f"Entity “{entity_name}” is not an array.", entity=entity_name)
        return rows
