from abc import abstractmethod
from collections.abc import Callable
from typing import NamedTuple

from ...decision_tree.bindings import Status
from ...simulation.Agent import Agent


class ResponsibleStatus(Status):
    "Status that knows how to drive an agent while it is active."

    @abstractmethod
    def apply_this_status(self, agent: Agent, dt: float) -> None: ...


class StatusKind(NamedTuple):
    name: str
    palette: Callable[[], list[ResponsibleStatus]]
