from typing import Optional

from ..brain.Brain import Brain
from ..Config import *
from ..decision_tree.bindings import Question
from ..decision_tree.errors import InvalidArgumentError, InvalidStateError
from ..simulation.Agent import Agent
from ..simulation.Point import Point
from .questions.ResponsibleQuestion import ResponsibleQuestion
from .statuses.impl.rotate import RotateStatus
from .statuses.ResponsibleStatus import ResponsibleStatus


class Bob(Agent):
    def __init__(self, position: Point, brain: Brain, simulation: Optional["Simulation"] = None, radius: float = BOB_RADIUS, brain_update_time: float = BOB_BRAIN_UPDATE_TIME) -> None:
        super().__init__(
            position,
            radius,
            brain_update_time,
            brain,
            simulation,
            BRAIN_ENERGY_COST,
            SPEED_ENERGY_COST,
            ANGULAR_SPEED_ENERGY_COST,
            EAT_FOOD_ENERGY_COST,
        )
        self.local_status = RotateStatus(BOB_INITIAL_ANGULAR_SPEED)

    def answer(self, question: Question) -> bool:
        if not isinstance(question, ResponsibleQuestion):
            raise InvalidArgumentError(f"Bob only answers ResponsibleQuestion, got {type(question).__name__}")
        return question.apply(self)

    def status_activity(self, dt: float) -> None:
        if not isinstance(self.local_status, ResponsibleStatus):
            raise InvalidStateError(f"Bob can only act on a ResponsibleStatus, got {type(self.local_status).__name__}")
        self.local_status.apply_this_status(self, dt)
