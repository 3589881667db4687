from __future__ import annotations


class FakeDBError(Exception):
    """Базовая ошибка FakeDB."""
    code: str = "FAKEDB_ERROR"

    def __init__(self, message: str, *, entity: str | None = None):
        super().__init__(message)
        self.entity = entity


class InvalidEntry(FakeDBError):
    code = "INVALID_ENTRY"


class EntityNotFound(FakeDBError):
    code = "ENTITY_NOT_FOUND"


class EntityNotArray(FakeDBError):
    code = "ENTITY_NOT_ARRAY"
