from .async_db import AsyncSessionLocal, async_engine, dispose_engine, get_async_db, get_async_db_context

__all__ = [
    "AsyncSessionLocal",
    "async_engine",
    "dispose_engine",
    "get_async_db",
    "get_async_db_context",
]
