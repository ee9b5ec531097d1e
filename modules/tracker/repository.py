"""Week files for the tracker, one per ISO week."""
import logging
from datetime import date
from pathlib import Path
from typing import List, Optional

from common.storage import LocalStorage, StorageBackend

from .document import Document
from .parser import parse_document
from .serializer import default_document, write_document

logger = logging.getLogger(__name__)

WEEK_SUFFIX = '.txt'


def week_name(day: date) -> str:
    """File name of the week containing day, e.g. '2020-W28.txt'."""
    year, week, _ = day.isocalendar()
    return f"{year}-W{week:02d}{WEEK_SUFFIX}"


class TrackerRepository:
    """Reads and writes week documents through a storage backend."""

    def __init__(self, storage: StorageBackend):
        self.storage = storage

    @classmethod
    def from_directory(cls, data_dir) -> 'TrackerRepository':
        return cls(LocalStorage(data_dir))

    def path_for(self, day: date) -> Optional[Path]:
        """Location of the week file, when the backend is a local directory."""
        if isinstance(self.storage, LocalStorage):
            return self.storage.path(week_name(day))
        return None

    def read_document(self, day: date) -> Optional[Document]:
        """Parsed week document, None when the week has no file yet."""
        text = self.storage.read_text(week_name(day))
        if text is None:
            return None
        return parse_document(text)

    def load_document(self, day: date) -> Document:
        """Parsed week document, or the empty template for that week."""
        document = self.read_document(day)
        if document is None:
            logger.info(f"No log for {week_name(day)}, starting from template")
            return default_document(day)
        return document

    def save_document(self, day: date, document: Document) -> Path:
        location = self.storage.write_text(week_name(day), write_document(document))
        logger.info(f"Saved {week_name(day)}")
        return location

    def weeks(self) -> List[str]:
        """Stored week names, oldest first."""
        return sorted(
            name[:-len(WEEK_SUFFIX)]
            for name in self.storage.list()
            if name.endswith(WEEK_SUFFIX)
        )
