"""Loading of the static medal catalog."""

from __future__ import annotations

import hashlib
import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

from pydantic import TypeAdapter

from .config import get_settings
from .medals import Medal

logger = logging.getLogger(__name__)

_MEDAL_LIST = TypeAdapter(List[Medal])


class MedalCatalog:
    """Immutable snapshot of a medal catalog."""

    def __init__(self, medals: Iterable[Medal]) -> None:
        ordered: Tuple[Medal, ...] = tuple(medals)
        lookup: Dict[str, Medal] = {}
        for medal in ordered:
            if medal.id in lookup:
                raise ValueError(f"Duplicate medal id '{medal.id}' in catalog.")
            lookup[medal.id] = medal
        self._medals = ordered
        self._lookup = lookup
        canonical = json.dumps(
            [medal.model_dump(mode="json") for medal in ordered],
            sort_keys=True,
            separators=(",", ":"),
        )
        self._fingerprint = hashlib.sha256(canonical.encode("utf-8")).hexdigest()

    @classmethod
    def from_payload(cls, payload: Any) -> "MedalCatalog":
        if isinstance(payload, dict):
            payload = payload.get("medals", [])
        if not isinstance(payload, list):
            raise ValueError("Medal catalog must be a list or an object with a 'medals' list.")
        return cls(_MEDAL_LIST.validate_python(payload))

    @property
    def medals(self) -> Tuple[Medal, ...]:
        return self._medals

    @property
    def fingerprint(self) -> str:
        return self._fingerprint

    def get(self, medal_id: str) -> Optional[Medal]:
        return self._lookup.get(medal_id)

    def categories(self) -> List[str]:
        return sorted({medal.lane_key for medal in self._medals})

    def __len__(self) -> int:
        return len(self._medals)


def load_catalog(path: Path | str) -> MedalCatalog:
    catalog_path = Path(path)
    with catalog_path.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)
    catalog = MedalCatalog.from_payload(payload)
    logger.info("Loaded %d medals from %s", len(catalog), catalog_path)
    return catalog


@lru_cache
def get_catalog() -> MedalCatalog:
    """Load the catalog named by ``SKILLTREE_MEDAL_CATALOG`` once per process."""
    path = get_settings().medal_catalog_path
    if not path:
        raise LookupError("No medal catalog configured (set SKILLTREE_MEDAL_CATALOG).")
    try:
        return load_catalog(path)
    except OSError as exc:
        logger.error("Unable to read medal catalog %s: %s", path, exc)
        raise LookupError(f"Medal catalog '{path}' could not be read.") from exc


__all__ = ["MedalCatalog", "get_catalog", "load_catalog"]
