"""Entity store interface and its SQLAlchemy adapter."""

from fitchallenge.store.base import EntityStore
from fitchallenge.store.sql import SqlEntityStore

__all__ = ["EntityStore", "SqlEntityStore"]
