"""
Builders that turn a LifelogConfig into ready-to-use stores and services.
"""

import logging
from typing import Optional

from casual_lifelog.config import LifelogConfig
from casual_lifelog.snippet_service import RemoteErrorSink, SnippetService
from casual_lifelog.storage.local.file import JsonFileSnippetStore
from casual_lifelog.storage.local.memory import InMemorySnippetStore
from casual_lifelog.storage.local.redis import RedisSnippetStore
from casual_lifelog.storage.protocols import RemoteMirror, SnippetStore
from casual_lifelog.storage.remote.disabled import DisabledRemoteMirror
from casual_lifelog.storage.remote.sqlalchemy import SQLAlchemyRemoteMirror

logger = logging.getLogger(__name__)


def create_local_store(config: LifelogConfig) -> SnippetStore:
    """Create the local snippet cache selected by the config."""
    if config.local_backend == "memory":
        return InMemorySnippetStore(key=config.storage_key)

    if config.local_backend == "redis":
        return RedisSnippetStore(
            host=config.redis_host,
            port=config.redis_port,
            db=config.redis_db,
            key=config.storage_key,
        )

    return JsonFileSnippetStore(config.data_dir, key=config.storage_key)


def create_remote_mirror(config: LifelogConfig) -> RemoteMirror:
    """
    Create the remote mirror, or a disabled one when it is not configured.

    Availability is fixed here for the process lifetime.
    """
    if not config.remote_enabled:
        logger.info("Remote mirror not configured; running local-only")
        return DisabledRemoteMirror()

    mirror = SQLAlchemyRemoteMirror.from_url(config.remote_url, config.remote_key)
    mirror.create_tables()
    return mirror


def create_snippet_service(
    config: Optional[LifelogConfig] = None,
    on_remote_error: Optional[RemoteErrorSink] = None,
) -> SnippetService:
    """
    Create a SnippetService from configuration (default: from the environment).
    """
    config = config or LifelogConfig.from_env()
    return SnippetService(
        local_store=create_local_store(config),
        remote=create_remote_mirror(config),
        on_remote_error=on_remote_error,
    )
