"""
JSON file storage for the tracker dataset.

The whole dataset lives in a single document that is loaded per request and,
for mutations, written back in full. A process-local lock spans the complete
read-modify-write cycle; separate processes sharing the file are not
coordinated.
"""
import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from functools import lru_cache
from pathlib import Path
from typing import Iterator

from pydantic import ValidationError

from account_tracker.core.config import settings
from account_tracker.models.dataset import Dataset

logger = logging.getLogger(__name__)


class StorageError(RuntimeError):
    """The data file could not be read, parsed or written."""


class JsonFileStorage:
    def __init__(self, path):
        self.path = Path(path)
        self._lock = threading.RLock()

    def load(self) -> Dataset:
        """Read the document, creating an empty one if the file does not exist yet."""
        with self._lock:
            if not self.path.exists():
                logger.info(f"Data file {self.path} not found, initializing empty dataset")
                dataset = Dataset()
                self.save(dataset)
                return dataset
            try:
                document = json.loads(self.path.read_text(encoding="utf-8"))
                return Dataset.model_validate(document)
            except (OSError, ValueError, ValidationError) as e:
                raise StorageError(f"Could not load {self.path}: {e}") from e

    def save(self, dataset: Dataset):
        """Replace the document atomically via a temp file in the same directory."""
        payload = json.dumps(dataset.to_document(), indent=2)
        with self._lock:
            directory = self.path.parent
            try:
                directory.mkdir(parents=True, exist_ok=True)
                fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=f".{self.path.name}.", suffix=".tmp")
                try:
                    with os.fdopen(fd, "w", encoding="utf-8") as fh:
                        fh.write(payload)
                    os.replace(tmp_path, self.path)
                except BaseException:
                    if os.path.exists(tmp_path):
                        os.remove(tmp_path)
                    raise
            except OSError as e:
                raise StorageError(f"Could not write {self.path}: {e}") from e

    @contextmanager
    def transaction(self) -> Iterator[Dataset]:
        """
        Load, hand the dataset to the caller, save on clean exit.

        If the block raises (validation failure, 404, ...) nothing is written.
        """
        with self._lock:
            dataset = self.load()
            yield dataset
            self.save(dataset)


@lru_cache()
def get_storage() -> JsonFileStorage:
    """FastAPI dependency; override in tests to point at a temp file."""
    return JsonFileStorage(settings.DATA_FILE)
