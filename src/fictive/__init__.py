from fictive.delay import (
    DEFAULT_DELAY_MS,
    DeferredFailure,
    delayed_settlement,
    fake_error,
    fake_reply,
    reject_after_delay,
    resolve_after_delay,
)
from fictive.errors import EntityNotArray, EntityNotFound, FakeDBError, InvalidEntry
from fictive.settings import FictiveSettings, get_settings
from fictive.store import FakeDB

__all__ = [
    "DEFAULT_DELAY_MS",
    "DeferredFailure",
    "delayed_settlement",
    "resolve_after_delay",
    "reject_after_delay",
    "fake_reply",
    "fake_error",
    "FakeDB",
    "FakeDBError",
    "InvalidEntry",
    "EntityNotFound",
    "EntityNotArray",
    "FictiveSettings",
    "get_settings",
]
