"""Public API exports for network_api model, errors and plugin contracts."""

from .model import Node, Edge, Network
from .errors import (
    NetworkError,
    NetworkValidationError,
    NetworkFormatError,
    InvalidNameError,
    MalformedInteractionError,
    MalformedFileLineError,
    UnknownNodeError,
    EmptyNetworkStatisticError,
)
from .services import DataSourcePlugin, ExporterPlugin

__all__ = [
    "Node",
    "Edge",
    "Network",
    "NetworkError",
    "NetworkValidationError",
    "NetworkFormatError",
    "InvalidNameError",
    "MalformedInteractionError",
    "MalformedFileLineError",
    "UnknownNodeError",
    "EmptyNetworkStatisticError",
    "DataSourcePlugin",
    "ExporterPlugin",
]
