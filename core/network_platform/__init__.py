"""Orchestration layer over the network model: plugins, workspace and engine."""

from .engine import NetworkEngine
from .registry import PluginRegistry
from .workspace import Workspace

__all__ = ["NetworkEngine", "PluginRegistry", "Workspace"]
