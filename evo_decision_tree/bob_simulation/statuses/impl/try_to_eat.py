from dataclasses import dataclass

from ....Config import EAT_REACH
from ....simulation.Agent import Agent
from ..ResponsibleStatus import ResponsibleStatus, StatusKind
from . import rotate, stick_to_speed


@dataclass(frozen=True)
class TryToEatAndSwitchTo(ResponsibleStatus):
    "Eat the nearest food in reach, if any, then hand over to ``next_status``."

    next_status: ResponsibleStatus

    def apply_this_status(self, agent: Agent, dt: float) -> None:
        if agent.simulation is not None:
            nearest = agent.simulation.nearest_food(agent.position)
            if nearest is not None:
                food, distance = nearest
                if distance < agent.radius + food.radius + EAT_REACH:
                    food.be_eaten_by(agent)
        agent.local_status = self.next_status

    def __str__(self) -> str:
        return f"eat+{self.next_status}"


def palette() -> list[TryToEatAndSwitchTo]:
    return [TryToEatAndSwitchTo(status) for status in rotate.palette() + stick_to_speed.palette()]


kind = StatusKind("try to eat", palette)
