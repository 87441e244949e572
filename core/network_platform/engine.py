import logging
import os.path
from typing import Dict, List, Optional, Tuple

from .registry import PluginRegistry
from .workspace import Workspace
from api.network_api.model import Edge, Network, Node
from api.network_api.errors import NetworkError
from api.network_api.services import DataSourcePlugin, ExporterPlugin

LOGGER = logging.getLogger(__name__)

UNTITLED = "Untitled"


class NetworkEngine:
    """
    High-level orchestration layer.

    Responsibilities:
    - Plugin execution
    - Network lifecycle management
    - Delegation to Workspace and to the current Network
    """

    def __init__(self):
        self.registry = PluginRegistry()
        self.workspace = Workspace()

    # ==========================================================
    # MAIN ORCHESTRATION
    # ==========================================================

    def open_network(self, datasource_name: str, source: str, name: Optional[str] = None, **options) -> Network:
        datasource_cls = self.registry.get_datasource(datasource_name)
        if not datasource_cls:
            raise ValueError(f"Datasource '{datasource_name}' not found.")

        datasource: DataSourcePlugin = datasource_cls()

        try:
            network = datasource.load_network(source, **options)
        except (NetworkError, OSError) as exc:
            LOGGER.warning("Opening %s with %s failed: %s", source, datasource.display_name, exc)
            raise

        # Opening replaces the current network
        path = source or options.get("file_path", "")
        self.workspace.set_network(network, name or os.path.basename(str(path)))
        LOGGER.info("Network %s opened.", self.workspace.get_name())
        return network

    def export(self, exporter_name: str, destination: Optional[str] = None, **options) -> str:
        exporter_cls = self.registry.get_exporter(exporter_name)
        if not exporter_cls:
            raise ValueError(f"Exporter '{exporter_name}' not found.")

        exporter: ExporterPlugin = exporter_cls()
        options.setdefault("network_name", self.workspace.get_name() or UNTITLED)
        output = exporter.render(self.current_network(), **options)

        if destination:
            with open(destination, "w", encoding="utf-8") as f:
                f.write(output)
            LOGGER.info("%s written to %s.", exporter.display_name, destination)

        return output

    # ==========================================================
    # WORKSPACE DELEGATION API
    # ==========================================================

    def current_network(self) -> Network:
        # Statistics on an unopened workspace behave as on an empty network
        network = self.workspace.get_network()
        if network is None:
            network = Network()
            self.workspace.set_network(network, UNTITLED)
        return network

    def clear_workspace(self):
        self.workspace.clear()

    def summary(self) -> Dict[str, object]:
        return {
            "network": self.workspace.get_name(),
            "nodes": len(self.workspace.list_nodes()),
            "edges": len(self.workspace.list_edges()),
        }

    # -----------------
    # MUTATION
    # -----------------
    def add_interaction(self, text: str) -> Edge:
        try:
            edge = self.current_network().add_single_interaction(text)
        except NetworkError as exc:
            LOGGER.warning("Interaction %r rejected: %s", text, exc)
            raise
        LOGGER.info("New interaction added for %s", text)
        return edge

    # -----------------
    # STATISTICS
    # -----------------
    def node_degree(self, name: str) -> int:
        return self.current_network().node_degree(name)

    def average_degree(self) -> float:
        return self.current_network().average_degree()

    def hubs(self) -> Tuple[int, List[Node]]:
        return self.current_network().hubs()

    def degree_distribution(self) -> Dict[int, int]:
        return self.current_network().degree_distribution()
