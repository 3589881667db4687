from __future__ import annotations

from collections.abc import Mapping
from types import SimpleNamespace
from typing import Any, Dict


def _public_members(source: Any) -> Dict[str, Any]:
    if source is None:
        return {}
    if isinstance(source, Mapping):
        items = source.items()
    else:
        items = ((name, getattr(source, name)) for name in dir(source))
    return {name: value for name, value in items if not name.startswith("_")}


def with_fictive(real: Any, fake: Any, *, enabled: bool = True) -> SimpleNamespace:
    """
    Собрать API сервиса: реальные функции, поверх которых (если ``enabled``)
    лежат фейковые реализации из ``fake``.

    ``real`` и ``fake`` могут быть модулем, объектом или dict. В ``fake``
    достаточно только тех функций, которые уже замоканы.
    """
    members = _public_members(real)
    if enabled:
        members.update(_public_members(fake))
    return SimpleNamespace(**members)
