import logging
from typing import Dict, Iterable, List, Optional, Tuple

from .node import Node
from .edge import Edge, canonical_key
from ..errors import (
    EmptyNetworkStatisticError,
    InvalidNameError,
    MalformedFileLineError,
    MalformedInteractionError,
    UnknownNodeError,
)

LOGGER = logging.getLogger(__name__)

FIELD_DELIMITER = "\t"
INTERACTION_DELIMITER = ","


class Network:
    """
    Undirected network built incrementally from pairwise interactions.

    The network owns every Node; edges refer to them by their index in
    ``nodes``. Nodes and edges are only ever appended, so the sum of all
    degrees always equals twice the number of edges.

    Not safe for concurrent mutation: ``ensure_node`` and ``ensure_edge``
    look up and then insert without locking.
    """

    def __init__(self):
        self._nodes: List[Node] = []
        self._edges: List[Edge] = []
        self._node_index: Dict[str, int] = {}
        self._edge_index: Dict[Tuple[str, str], Edge] = {}

    # -----------------
    # READ-ONLY VIEWS
    # -----------------

    @property
    def nodes(self) -> Tuple[Node, ...]:
        return tuple(self._nodes)

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return tuple(self._edges)

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip() in self._node_index

    def get_node(self, name: str) -> Optional[Node]:
        index = self._node_index.get(name.strip())
        return None if index is None else self._nodes[index]

    def endpoints(self, edge: Edge) -> Tuple[Node, Node]:
        return self._nodes[edge.one], self._nodes[edge.two]

    def has_edge(self, name_a: str, name_b: str) -> bool:
        return canonical_key(name_a.strip(), name_b.strip()) in self._edge_index

    # -----------------
    # NODE OPERATIONS
    # -----------------

    @staticmethod
    def validate_node_name(name: str) -> str:
        name = name.strip()
        if not name:
            raise InvalidNameError()
        return name

    def ensure_node(self, name: str) -> Node:
        index = self._node_index.get(name)
        if index is None:
            index = len(self._nodes)
            self._nodes.append(Node(name))
            self._node_index[name] = index
        return self._nodes[index]

    # -----------------
    # EDGE OPERATIONS
    # -----------------

    def ensure_edge(self, name_a: str, name_b: str) -> Edge:
        # Both names are checked before anything is created
        name_a = self.validate_node_name(name_a)
        name_b = self.validate_node_name(name_b)

        key = canonical_key(name_a, name_b)
        edge = self._edge_index.get(key)
        if edge is not None:
            return edge

        node_a = self.ensure_node(name_a)
        node_b = self.ensure_node(name_b)
        edge = Edge(self._node_index[name_a], self._node_index[name_b], name_a, name_b)
        self._edges.append(edge)
        self._edge_index[key] = edge

        # A self-edge increments the same node twice
        node_a.degree += 1
        node_b.degree += 1
        return edge

    def load_from_lines(self, lines: Iterable[str], source: str = "<lines>", atomic: bool = False) -> int:
        """
        Add one edge per tab-delimited line and return the number of lines read.

        The first malformed line raises ``MalformedFileLineError`` and stops
        the load. Edges added by earlier lines are kept unless ``atomic`` is
        set, in which case the network is restored to its state before the call.
        """
        checkpoint = (len(self._nodes), len(self._edges))
        line_number = 0
        try:
            for line_number, line in enumerate(lines, start=1):
                fields = line.rstrip("\r\n").split(FIELD_DELIMITER)
                if len(fields) != 2:
                    raise MalformedFileLineError(source, line_number, "File is not in correct format.")
                try:
                    self.ensure_edge(fields[0], fields[1])
                except InvalidNameError as exc:
                    raise MalformedFileLineError(source, line_number, str(exc)) from exc
        except BaseException as exc:
            if isinstance(exc, MalformedFileLineError):
                LOGGER.warning("Load of %s aborted at line %d.", source, line_number)
            else:
                LOGGER.warning("Load of %s failed after line %d: %s", source, line_number, exc)
            if atomic:
                self._rollback(*checkpoint)
            raise

        LOGGER.debug(
            "Loaded %d lines from %s (%d nodes, %d edges).",
            line_number, source, len(self._nodes), len(self._edges),
        )
        return line_number

    def add_single_interaction(self, text: str) -> Edge:
        fields = text.split(INTERACTION_DELIMITER)
        if len(fields) < 2:
            raise MalformedInteractionError(text, "Less than two node names provided.")
        if len(fields) > 2:
            raise MalformedInteractionError(text, "Add Interaction only accepts two node names.")
        return self.ensure_edge(fields[0], fields[1])

    def _rollback(self, node_count: int, edge_count: int) -> None:
        for edge in self._edges[edge_count:]:
            del self._edge_index[edge.key]
            self._nodes[edge.one].degree -= 1
            self._nodes[edge.two].degree -= 1
        del self._edges[edge_count:]

        for node in self._nodes[node_count:]:
            del self._node_index[node.name]
        del self._nodes[node_count:]

    # -----------------
    # STATISTICS
    # -----------------

    def node_degree(self, name: str) -> int:
        name = self.validate_node_name(name)
        index = self._node_index.get(name)
        if index is None:
            raise UnknownNodeError(name)
        return self._nodes[index].degree

    def average_degree(self) -> float:
        # Self-edges also add 2 to the degree sum
        if not self._nodes:
            raise EmptyNetworkStatisticError("average degree")
        return (len(self._edges) * 2) / len(self._nodes)

    def max_degree(self) -> int:
        return max((node.degree for node in self._nodes), default=0)

    def hubs_of_degree(self, degree: int) -> List[Node]:
        return [node for node in self._nodes if node.degree == degree]

    def hubs(self) -> Tuple[int, List[Node]]:
        highest = self.max_degree()
        return highest, self.hubs_of_degree(highest)

    def degree_distribution(self) -> Dict[int, int]:
        distribution: Dict[int, int] = {}
        for node in self._nodes:
            distribution[node.degree] = distribution.get(node.degree, 0) + 1
        return distribution

    def dense_degree_distribution(self) -> List[Tuple[int, int]]:
        """Rows for degrees 1..max_degree(), zero-filled; degree 0 is omitted."""
        distribution = self.degree_distribution()
        return [(degree, distribution.get(degree, 0)) for degree in range(1, self.max_degree() + 1)]

    def to_dict(self) -> dict:
        return {
            "nodes": [node.to_dict() for node in self._nodes],
            "edges": [edge.to_dict() for edge in self._edges],
        }
