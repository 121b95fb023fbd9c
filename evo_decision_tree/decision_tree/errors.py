class InvalidArgumentError(ValueError):
    def __init__(self, msg: str) -> None:
        super().__init__("Invalid argument: " + msg)


class InvalidStateError(RuntimeError):
    def __init__(self, msg: str) -> None:
        super().__init__("Invalid state: " + msg)


class StructuralCorruptionError(Exception):
    "Raised when a tree no longer has the shape its owner relies on; never retry after it."

    def __init__(self, msg: str) -> None:
        super().__init__("Corrupted decision tree: " + msg)
