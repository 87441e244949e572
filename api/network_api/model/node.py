class Node:
    def __init__(self, name: str, degree: int = 0):
        # Name is validated and trimmed by the owning Network
        self.name = name
        self.degree = degree

    def __str__(self) -> str:
        return f"<{self.name}>"

    def __repr__(self) -> str:
        return f"Node(name={self.name!r}, degree={self.degree})"

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "degree": self.degree,
        }
