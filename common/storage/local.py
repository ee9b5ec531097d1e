"""Local filesystem storage backend."""
import logging
from pathlib import Path
from typing import List, Optional, Union

from .backend import StorageBackend

logger = logging.getLogger(__name__)


class LocalStorage(StorageBackend):
    """UTF-8 text files in a single directory."""
    
    def __init__(self, root: Union[str, Path]):
        self.root = Path(root).expanduser()
    
    def path(self, name: str) -> Path:
        return self.root / name
    
    def read_text(self, name: str) -> Optional[str]:
        path = self.path(name)
        if not path.exists():
            logger.debug(f"No file at {path}")
            return None
        return path.read_text(encoding='utf-8')
    
    def write_text(self, name: str, text: str) -> Path:
        path = self.path(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding='utf-8')
        logger.debug(f"Wrote {len(text)} chars to {path}")
        return path
    
    def list(self, prefix: str = '') -> List[str]:
        if not self.root.is_dir():
            return []
        return sorted(
            p.name for p in self.root.iterdir()
            if p.is_file() and p.name.startswith(prefix)
        )
