# ----- slotbook/config.py -----
import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv("config.env")

BACKENDS = ("file", "firestore")


@dataclass
class Settings:
    backend: str = field(default_factory=lambda: os.getenv("SLOTBOOK_BACKEND", "file").strip().lower())
    data_file: str = field(default_factory=lambda: os.getenv("SLOTBOOK_DATA_FILE", "./slotbook_storage.json"))
    firestore_collection: str = field(default_factory=lambda: os.getenv("SLOTBOOK_FIRESTORE_COLLECTION", "kv"))
    gcp_project: str | None = field(default_factory=lambda: os.getenv("GCP_PROJECT") or None)
    log_level: str = field(default_factory=lambda: os.getenv("LOGLEVEL", "INFO").upper())

    def __post_init__(self):
        if self.backend not in BACKENDS:
            raise ValueError(f"Unknown storage backend {self.backend!r}; expected one of {BACKENDS}")


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format="%(asctime)s %(message)s")
