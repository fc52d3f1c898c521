"""Business logic services for QuickDict."""

from .content_rewriter import ContentRewriter
from .protocol_server import AssetProtocolServer
from .providers import DirectoryResourceStore, FreeDictionaryClient, JsonDictionaryIndex
from .redirect_resolver import RedirectResolver, find_redirect_target
from .resource_cache import ResourceCache
from .resource_locator import ResourceLocator
from .result_merger import ResultMerger

__all__ = [
    "ResourceCache",
    "ResourceLocator",
    "AssetProtocolServer",
    "RedirectResolver",
    "find_redirect_target",
    "ContentRewriter",
    "ResultMerger",
    "JsonDictionaryIndex",
    "DirectoryResourceStore",
    "FreeDictionaryClient",
]
