from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Mapping

from fictive.store import FakeDB


def load_json_fixture(path: str | Path) -> Any:
    return json.loads(Path(path).read_text(encoding="utf-8"))


def seed(db: FakeDB, fixtures: Mapping[str, Any]) -> List[str]:
    """Create one entity per ``{name: initial_state}`` item. Existing entities are overwritten."""
    names: List[str] = []
    for name, initial_state in fixtures.items():
        db.create(name, initial_state)
        names.append(name)
    logging.info(
        "fakedb_seeded",
        extra={"event": "fakedb_seeded", "entities": names},
    )
    return names
