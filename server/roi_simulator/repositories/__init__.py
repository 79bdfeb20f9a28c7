"""
Scenario Repository Package

Interchangeable scenario stores: a SQLAlchemy adapter for SQLite/PostgreSQL and
a process-local in-memory adapter.
"""

from roi_simulator.core.config import ScenarioStore

from .base import ScenarioRecord, ScenarioRepository, ScenarioRepositoryFactory
from .memory_repository import InMemoryScenarioRepository
from .sqlalchemy_repository import SqlAlchemyScenarioRepository

# the memory store must outlive a single request
memory_store = InMemoryScenarioRepository()

ScenarioRepositoryFactory.register_repository(ScenarioStore.DATABASE, SqlAlchemyScenarioRepository)
ScenarioRepositoryFactory.register_repository(ScenarioStore.MEMORY, lambda **_: memory_store)

__all__ = [
    "InMemoryScenarioRepository",
    "ScenarioRecord",
    "ScenarioRepository",
    "ScenarioRepositoryFactory",
    "SqlAlchemyScenarioRepository",
    "memory_store",
]
