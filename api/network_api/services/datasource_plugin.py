"""Datasource plugin interface definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any
from api.network_api.model import Network


class DataSourcePlugin(ABC):
    """Contract for plugins that load interaction networks from external sources."""

    @property
    @abstractmethod
    def plugin_id(self) -> str:
        """Return a unique, stable plugin identifier."""

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Return a human-readable plugin name for logs and drivers."""

    def parameters_schema(self) -> dict[str, Any] | None:
        """Return an optional parameter schema describing accepted options."""
        return None

    @abstractmethod
    def load_network(self, source: Any, **options: Any) -> Network:
        """Load and return a network from the provided source."""
