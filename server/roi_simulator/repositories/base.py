"""
Scenario Repository Base Classes and Interfaces

Defines the contract every scenario store adapter implements. The service layer
only talks to ScenarioRepository, so the relational and in-process stores are
interchangeable.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from roi_simulator.core.config import ScenarioStore


@dataclass(frozen=True)
class ScenarioRecord:
    """Storage-neutral view of a persisted scenario."""

    id: str
    scenario_name: str
    inputs: Dict[str, Any]
    results: Dict[str, Any]
    created_at: datetime
    updated_at: datetime


class ScenarioRepository(ABC):
    """Abstract base class for scenario store adapters."""

    @abstractmethod
    async def save(self, scenario_name: str, inputs: Dict[str, Any], results: Dict[str, Any]) -> ScenarioRecord:
        """
        Persist a new scenario.

        Args:
            scenario_name: Resolved (non-empty) scenario name
            inputs: Validated inputs, including the resolved name
            results: Results calculated from ``inputs``

        Returns:
            The stored record with generated id and timestamps

        Raises:
            ScenarioPersistenceError: If the store rejects the write
        """

    @abstractmethod
    async def list_all(self) -> List[ScenarioRecord]:
        """Return every stored scenario, newest first."""

    @abstractmethod
    async def get_by_id(self, scenario_id: str) -> Optional[ScenarioRecord]:
        """Return the scenario with ``scenario_id`` or None."""

    @abstractmethod
    async def delete_by_id(self, scenario_id: str) -> bool:
        """Delete a scenario; False when nothing matched."""

    @abstractmethod
    async def count(self) -> int:
        """Number of stored scenarios."""

    async def next_default_name(self) -> str:
        """
        Name for a scenario saved without one.

        Reads the count and does not reserve it, so concurrent saves may get
        the same name.
        """
        return f"Scenario {await self.count() + 1}"


class ScenarioRepositoryFactory:
    """Factory for creating scenario repository instances."""

    _builders: Dict[ScenarioStore, Callable[..., ScenarioRepository]] = {}

    @classmethod
    def register_repository(cls, store: ScenarioStore, builder: Callable[..., ScenarioRepository]) -> None:
        """Register a repository implementation for a store type."""
        cls._builders[store] = builder

    @classmethod
    def create_repository(cls, store: ScenarioStore, **config: Any) -> ScenarioRepository:
        """Create a repository instance."""
        if store not in cls._builders:
            raise ValueError(f"Unsupported scenario store: {store}")
        return cls._builders[store](**config)

    @classmethod
    def get_supported_stores(cls) -> List[ScenarioStore]:
        return list(cls._builders.keys())
