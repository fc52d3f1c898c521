"""Orchestration of services into lookup and search operations."""

from .app_context import AppContext
from .lookup_orchestrator import LookupOrchestrator
from .sequencer import RequestSequencer

__all__ = ["AppContext", "LookupOrchestrator", "RequestSequencer"]
