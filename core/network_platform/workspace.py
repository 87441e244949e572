from typing import Optional, List
from api.network_api.model import Network, Node, Edge


class Workspace:
    """
    Holds the network the driver is working on and the name it was opened under.

    Opening a file replaces the network; the previous one is dropped.
    """

    def __init__(self):
        self._network: Optional[Network] = None
        self._name: str = ""

    def set_network(self, network: Network, name: str) -> None:
        self._network = network
        self._name = name

    def get_network(self) -> Optional[Network]:
        return self._network

    def get_name(self) -> str:
        return self._name

    def has_network(self) -> bool:
        return self._network is not None

    def clear(self) -> None:
        self._network = None
        self._name = ""

    def list_nodes(self) -> List[Node]:
        if self._network is None:
            return []
        return list(self._network.nodes)

    def list_edges(self) -> List[Edge]:
        if self._network is None:
            return []
        return list(self._network.edges)
