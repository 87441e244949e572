"""
Core network domain model (Node, Edge, Network).
"""

from .node import Node
from .edge import Edge, canonical_key
from .network import Network

__all__ = ["Node", "Edge", "Network", "canonical_key"]
