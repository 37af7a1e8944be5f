"""Runtime settings, read from the environment (and a ``.env`` file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    inventory_cache_ttl: float
    log_level: str

    @property
    def store_path(self) -> Path:
        return self.data_dir / "logitrack.json"


def load_settings() -> Settings:
    load_dotenv()
    return Settings(
        data_dir=Path(os.getenv("LOGITRACK_DATA_DIR", str(_DEFAULT_DATA_DIR))),
        inventory_cache_ttl=float(os.getenv("LOGITRACK_INVENTORY_CACHE_TTL", "30")),
        log_level=os.getenv("LOGITRACK_LOG_LEVEL", "WARNING").upper(),
    )
