from dataclasses import dataclass

from ....Config import ROTATE_ANGULAR_SPEEDS
from ....simulation.Agent import Agent
from ..ResponsibleStatus import ResponsibleStatus, StatusKind


@dataclass(frozen=True)
class RotateStatus(ResponsibleStatus):
    angular_speed: float

    def apply_this_status(self, agent: Agent, dt: float) -> None:
        agent.angular_speed = self.angular_speed

    def __str__(self) -> str:
        return f"rotate({self.angular_speed:g})"


def palette() -> list[RotateStatus]:
    return [RotateStatus(angular_speed) for angular_speed in ROTATE_ANGULAR_SPEEDS]


kind = StatusKind("rotate", palette)
