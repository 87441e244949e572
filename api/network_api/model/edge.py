from typing import Tuple


class Edge:
    # Undirected edge between two node handles of the owning Network.
    # Self-edges (one == two) are valid.

    __slots__ = ("_one", "_two", "_names")

    def __init__(self, one: int, two: int, one_name: str, two_name: str):
        self._one = one
        self._two = two
        self._names = (one_name, two_name)

    @property
    def one(self) -> int:
        return self._one

    @property
    def two(self) -> int:
        return self._two

    @property
    def names(self) -> Tuple[str, str]:
        return self._names

    @property
    def key(self) -> Tuple[str, str]:
        return canonical_key(*self._names)

    @property
    def is_self_edge(self) -> bool:
        return self._one == self._two

    def __str__(self) -> str:
        return f"<{self._names[0]}>-<{self._names[1]}>"

    def __repr__(self) -> str:
        return f"Edge({self._names[0]!r}, {self._names[1]!r})"

    def to_dict(self) -> dict:
        return {
            "one": self._names[0],
            "two": self._names[1],
            "self_edge": self.is_self_edge,
        }


def canonical_key(name_a: str, name_b: str) -> Tuple[str, str]:
    """Order-independent identity of an undirected edge."""
    return (name_a, name_b) if name_a <= name_b else (name_b, name_a)
