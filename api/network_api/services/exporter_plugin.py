"""Exporter plugin interface definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any
from ..model import Network


class ExporterPlugin(ABC):
    """Contract for plugins that render network statistics to text."""

    @property
    @abstractmethod
    def plugin_id(self) -> str:
        """Return a unique, stable plugin identifier."""

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Return a human-readable plugin name for logs and drivers."""

    def render_options_schema(self) -> dict[str, Any] | None:
        """Return an optional render options schema."""
        return None

    @abstractmethod
    def render(self, network: "Network", **options: Any) -> str:
        """Render the provided network and return the text output."""
