"""Storage abstraction layer for tracker data."""

from .backend import StorageBackend
from .local import LocalStorage

__all__ = ['StorageBackend', 'LocalStorage']
