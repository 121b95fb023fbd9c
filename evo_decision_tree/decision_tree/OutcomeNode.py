from typing import Any, Optional

from .bindings import Status
from .errors import InvalidArgumentError
from .Node import Node


class OutcomeNode(Node):
    can_have_sons = False

    def __init__(self, status: Optional[Status] = None) -> None:
        super().__init__()
        self._status: Optional[Status] = None
        if status is not None:
            self.status = status

    @property
    def status(self) -> Optional[Status]:
        return self._status

    @status.setter
    def status(self, status: Status) -> None:
        if status is None:
            raise InvalidArgumentError("status must not be None")
        self._status = status

    def next(self, _: Any = None) -> None:
        return None

    def is_initialized(self) -> bool:
        return self.father is not None and self._status is not None

    def _copy_value(self) -> "OutcomeNode":
        return type(self)(self._status)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._status!r})"

    __slots__ = ["_status"]
