from __future__ import annotations

import asyncio
import logging
from typing import Any

from fictive.settings import get_settings

DEFAULT_DELAY_MS = 200


class DeferredFailure(Exception):
    """Simulated failed call. The payload is kept untouched in ``value``."""

    def __init__(self, value: Any):
        super().__init__(value)
        self.value = value


def _effective_delay_ms(delay_ms: float | None) -> float:
    if get_settings().testing:
        return 0
    if delay_ms is None:
        return DEFAULT_DELAY_MS
    return max(0, delay_ms)


def _settle(fut: asyncio.Future, value: Any, success: Any) -> None:
    # отменённый снаружи future уже done: второй раз не завершаем
    if fut.done():
        return
    if success is False:
        fut.set_exception(DeferredFailure(value))
    else:
        fut.set_result(value)


def delayed_settlement(value: Any, delay_ms: float | None = None, success: Any = True) -> asyncio.Future:
    """
    Future, который завершится через ``delay_ms`` миллисекунд.

    Таймер взводится сразу при вызове, а не при первом ``await``.
    Только ``success is False`` даёт ошибку, любое другое значение означает успех.
    Нужен запущенный event loop.
    """
    loop = asyncio.get_running_loop()
    fut = loop.create_future()
    delay = _effective_delay_ms(delay_ms)
    logging.debug(
        "deferred_scheduled",
        extra={
            "event": "deferred_scheduled",
            "delay_ms": delay,
            "outcome": "reject" if success is False else "resolve",
        },
    )
    loop.call_later(delay / 1000, _settle, fut, value, success)
    return fut


def resolve_after_delay(value: Any, delay_ms: float | None = None) -> asyncio.Future:
    return delayed_settlement(value, delay_ms)


def reject_after_delay(value: Any, delay_ms: float | None = None) -> asyncio.Future:
    return delayed_settlement(value, delay_ms, False)


fake_reply = resolve_after_delay
fake_error = reject_after_delay
