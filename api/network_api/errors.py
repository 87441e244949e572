"""Typed failures raised by the network model and its datasources."""


class NetworkError(Exception):
    """Base class for every failure raised by the network core."""


class NetworkValidationError(NetworkError, ValueError):
    """Rejected input; the network is left exactly as it was."""


class InvalidNameError(NetworkValidationError):
    def __init__(self, message: str = "Node name cannot be empty."):
        super().__init__(message)


class MalformedInteractionError(NetworkValidationError):
    def __init__(self, text: str, message: str):
        super().__init__(message)
        self.text = text


class UnknownNodeError(NetworkValidationError):
    def __init__(self, name: str):
        super().__init__(f"Node {name} is not in network.")
        self.name = name


class NetworkFormatError(NetworkError):
    """Input file is not an interaction list."""


class MalformedFileLineError(NetworkFormatError):
    def __init__(self, source: str, line_number: int, reason: str):
        super().__init__(f"{source}:{line_number}:{reason}")
        self.source = source
        self.line_number = line_number
        self.reason = reason


class EmptyNetworkStatisticError(NetworkError):
    def __init__(self, statistic: str):
        super().__init__(f"Cannot compute {statistic} of a network with no nodes.")
        self.statistic = statistic
