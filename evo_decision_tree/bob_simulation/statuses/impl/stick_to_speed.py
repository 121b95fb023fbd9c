from dataclasses import dataclass

from ....Config import STICK_TO_MAX_ACCELERATION, STICK_TO_SPEEDS
from ....simulation.Agent import Agent
from ..ResponsibleStatus import ResponsibleStatus, StatusKind


@dataclass(frozen=True)
class StickToSpeedStatus(ResponsibleStatus):
    speed: float
    max_acceleration: float

    def apply_this_status(self, agent: Agent, dt: float) -> None:
        # accelerates below the target speed, brakes above it
        agent.acceleration = self.max_acceleration * (self.speed - agent.speed)
        agent.angular_speed = 0.0

    def __str__(self) -> str:
        return f"speed->{self.speed:g}"


def palette() -> list[StickToSpeedStatus]:
    return [StickToSpeedStatus(speed, STICK_TO_MAX_ACCELERATION) for speed in STICK_TO_SPEEDS]


kind = StatusKind("stick to speed", palette)
