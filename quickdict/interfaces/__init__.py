"""Interface protocols for QuickDict."""

from .dictionary_index import DictionaryIndex
from .presenter import PresenterProtocol
from .resource_store import ResourceStore

__all__ = ["DictionaryIndex", "ResourceStore", "PresenterProtocol"]
