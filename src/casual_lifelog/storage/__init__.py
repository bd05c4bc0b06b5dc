"""
Storage protocols and backends for the snippet log.

Provides the local cache protocol (SnippetStore), the remote mirror protocol
(RemoteMirror) and the RemoteResult type their callers branch on. Backends
whose optional dependencies are missing are simply not exported.
"""

from casual_lifelog.storage.protocols import RemoteMirror, SnippetStore
from casual_lifelog.storage.results import RemoteResult

__all__ = [
    "SnippetStore",
    "RemoteMirror",
    "RemoteResult",
]

# Local cache implementations
from casual_lifelog.storage.local.memory import InMemorySnippetStore  # noqa: E402
from casual_lifelog.storage.local.file import JsonFileSnippetStore  # noqa: E402

__all__ += ["InMemorySnippetStore", "JsonFileSnippetStore"]

try:
    from casual_lifelog.storage.local.redis import RedisSnippetStore  # noqa: F401

    __all__.append("RedisSnippetStore")
except ImportError:
    pass

# Remote mirror implementations
from casual_lifelog.storage.remote.disabled import DisabledRemoteMirror  # noqa: E402
from casual_lifelog.storage.remote.memory import InMemoryRemoteMirror  # noqa: E402

__all__ += ["DisabledRemoteMirror", "InMemoryRemoteMirror"]

try:
    from casual_lifelog.storage.remote.sqlalchemy import SQLAlchemyRemoteMirror  # noqa: F401

    __all__.append("SQLAlchemyRemoteMirror")
except ImportError:
    pass
