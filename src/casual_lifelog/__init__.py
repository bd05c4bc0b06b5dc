"""
casual-lifelog: a life-logging snippet store with an optional remote mirror.

Core components:
- models: Snippet, SnippetDraft and StatBlock data models
- storage: Local snippet cache and remote mirror protocols and backends
- snippet_service: Reconciliation between the local cache and the remote mirror
- stats: Cumulative stat totals over a snippet log
- classifiers: LLM classification of life updates into stat deltas
- recorder: Classify-then-log flows for text, voice and image input
"""

__version__ = "0.1.0"

from casual_lifelog.config import LifelogConfig, configure_logging
from casual_lifelog.errors import ClassificationError, LifelogError, RemoteError
from casual_lifelog.models import (
    BASELINE_STATS,
    STAT_KEYS,
    STAT_LABELS,
    Classification,
    MediaPayload,
    Snippet,
    SnippetDraft,
    StatBlock,
)
from casual_lifelog.snippet_service import ClearAllResult, SnippetService
from casual_lifelog.stats import aggregate_stats
from casual_lifelog.storage.results import RemoteResult
from casual_lifelog.factory import create_snippet_service
from casual_lifelog.recorder import LogView, SnippetRecorder

__all__ = [
    "__version__",
    # Models
    "BASELINE_STATS",
    "STAT_KEYS",
    "STAT_LABELS",
    "Classification",
    "MediaPayload",
    "Snippet",
    "SnippetDraft",
    "StatBlock",
    # Errors
    "LifelogError",
    "RemoteError",
    "ClassificationError",
    # Services
    "SnippetService",
    "ClearAllResult",
    "RemoteResult",
    "SnippetRecorder",
    "LogView",
    "aggregate_stats",
    # Configuration
    "LifelogConfig",
    "configure_logging",
    "create_snippet_service",
]
