# dentalclinic/core/storage.py
import enum
import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

class EntityKind(str, enum.Enum):
    doctors = "doctors"
    patients = "patients"
    services = "services"
    visits = "visits"
    payments = "payments"

class BlobStore(Protocol):
    def read(self, key: EntityKind) -> str: ...
    def write(self, key: EntityKind, text: str) -> None: ...

class FileBlobStore:
    """One text file per entity kind inside ``root``."""

    def __init__(self, root: Path, suffix: str = ".txt"):
        self.root = Path(root)
        self.suffix = suffix

    def path_for(self, key: EntityKind) -> Path:
        return self.root / f"{key.value}{self.suffix}"

    def read(self, key: EntityKind) -> str:
        path = self.path_for(key)
        if not path.exists():
            return ""
        return path.read_text(encoding="utf-8")

    def write(self, key: EntityKind, text: str) -> None:
        self.root.mkdir(parents=True, exist_ok=True)
        path = self.path_for(key)
        path.write_text(text, encoding="utf-8")
        logger.debug("wrote %s (%d bytes)", path, len(text))

class MemoryBlobStore:
    def __init__(self, blobs: dict[EntityKind, str] | None = None):
        self.blobs: dict[EntityKind, str] = dict(blobs or {})

    def read(self, key: EntityKind) -> str:
        return self.blobs.get(key, "")

    def write(self, key: EntityKind, text: str) -> None:
        self.blobs[key] = text
