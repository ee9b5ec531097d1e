"""Abstract storage backend."""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, List


class StorageBackend(ABC):
    """Abstract base class for text storage backends."""
    
    @abstractmethod
    def read_text(self, name: str) -> Optional[str]:
        """Return stored text, None if nothing is stored under name."""
        pass
    
    @abstractmethod
    def write_text(self, name: str, text: str) -> Path:
        """Store text under name, return its location."""
        pass
    
    @abstractmethod
    def list(self, prefix: str = '') -> List[str]:
        """List stored names with optional prefix."""
        pass
