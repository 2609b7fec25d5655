from .connection_pool import AsyncPGDatabaseRepository

__all__ = ["AsyncPGDatabaseRepository"]
