"""Dictionary index, resource store and online client implementations."""

from .directory_store import DirectoryResourceStore
from .free_dictionary_client import FreeDictionaryClient
from .json_index import JsonDictionaryIndex

__all__ = ["JsonDictionaryIndex", "DirectoryResourceStore", "FreeDictionaryClient"]
