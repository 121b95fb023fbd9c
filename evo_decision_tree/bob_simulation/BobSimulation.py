import logging
from collections.abc import Sequence
from math import tau
from random import Random
from typing import Optional

from ..brain.Brain import Brain
from ..brain.DecisionTreeBrain import DecisionTreeBrain
from ..Config import *
from ..simulation.Point import Point
from ..simulation.Simulation import Simulation
from .Bob import Bob
from .Meat import Meat
from .questions.questions import question_palette
from .statuses.statuses import status_palette

logger = logging.getLogger(__name__)


class BobSimulation(Simulation):
    def __init__(self, rng: Optional[Random] = None, meat_spawn_rate: float = MEAT_SPAWN_RATE) -> None:
        super().__init__()
        self.rng = Random() if rng is None else rng
        self.meat_spawn_rate = meat_spawn_rate
        self._meat_due = 0.0

    @classmethod
    def create(
        cls,
        bob_count: int = BOB_COUNT,
        brain_depth: int = BRAIN_DEPTH,
        meat_count: int = MEAT_INITIAL_COUNT,
        seed: Optional[int] = None,
        brains: Optional[Sequence[Brain]] = None,
        meat_spawn_rate: float = MEAT_SPAWN_RATE,
    ) -> "BobSimulation":
        rng = Random(seed)
        simulation = cls(rng, meat_spawn_rate)
        if brains is None:
            questions, statuses = question_palette(), status_palette()
            brains = [DecisionTreeBrain.create_random(brain_depth, questions, statuses, rng) for _ in range(bob_count)]
        for brain in brains:
            simulation.spawn_bob(brain, rng.random(), rng.random())
        for _ in range(meat_count):
            simulation.spawn_meat(rng.random(), rng.random())
        logger.info("bob simulation created: %d bobs, %d meat", len(brains), meat_count)
        return simulation

    @property
    def bobs(self) -> list[Bob]:
        return [e for e in self.entities if isinstance(e, Bob)]

    def spawn_bob(self, brain: Brain, x: float, y: float) -> Bob:
        bob = Bob(Point(x, y), brain)
        bob.angle = self.rng.random() * tau
        self.add_agent(bob)
        return bob

    def spawn_meat(self, x: float, y: float) -> Meat:
        meat = Meat(Point(x, y))
        self.add_food(meat)
        return meat

    def update(self, dt: float) -> None:
        super().update(dt)
        self._meat_due += self.meat_spawn_rate * dt
        while self._meat_due >= 1.0:
            self._meat_due -= 1.0
            self.spawn_meat(self.rng.random(), self.rng.random())
