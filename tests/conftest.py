import pytest

from dentalclinic.core.storage import MemoryBlobStore
from dentalclinic.services.store import ClinicStore


@pytest.fixture
def blobs() -> MemoryBlobStore:
    return MemoryBlobStore()


@pytest.fixture
def store(blobs) -> ClinicStore:
    return ClinicStore(blobs)
