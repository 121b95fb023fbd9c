import logging
from collections import defaultdict
from threading import Lock
from typing import Optional

import atomics
import pandas as pd

from .bob_simulation.BobSimulation import BobSimulation
from .Config import *
from .evolve import evolve

logger = logging.getLogger(__name__)


class SimulationHolder:
    """A Bob simulation seeded with evolved brains, built once in the background and then stepped.

    ``lock`` guards every access to ``simulation``: the brains inside are not thread-safe.
    """

    def __init__(self) -> None:
        self.lock = Lock()
        self.progress = atomics.atomic(width=8, atype=atomics.INT)
        self.initialize_scheduled = atomics.atomic(width=4, atype=atomics.INT)
        self.initialized_flag = atomics.atomic(width=4, atype=atomics.INT)
        self.simulation: Optional[BobSimulation] = None
        self.history: Optional[pd.DataFrame] = None
        self.set_progress(0, 1)

    def get_and_set_initialize_scheduled(self) -> bool:
        return bool(self.initialize_scheduled.exchange(1))

    def get_progress(self) -> tuple[int, int]:
        x = self.progress.load()
        return x >> 32, x & 0xFFFFFFFF

    def set_progress(self, i: int, total: int) -> None:
        self.progress.store((i << 32) | total)

    def initialized(self) -> bool:
        return bool(self.initialized_flag.load())

    def initialize(self, seed: int, generations: int) -> None:
        with self.lock:
            logger.info("init: seed %d with %d generations", seed, generations)
            self._initialize(seed, generations)
            logger.info("fin:  seed %d with %d generations", seed, generations)
            self.initialized_flag.store(1)

    def _initialize(self, seed: int, generations: int) -> None:
        try:
            brains, self.history = evolve(generations, seed=seed, callback=self.set_progress)
            self.simulation = BobSimulation.create(brains=brains, seed=seed)
        except Exception:
            logger.exception("building the simulation for seed %d failed", seed)
            self.initialize_scheduled.store(0)
            raise

    def step(self, steps: int = 1, dt: float = TIME_STEP) -> None:
        with self.lock:
            for _ in range(steps):
                self.simulation.update(dt)

    __slots__ = ["lock", "progress", "initialize_scheduled", "initialized_flag", "simulation", "history"]


class Simulations:
    cached: defaultdict[tuple[int, int], SimulationHolder] = defaultdict(SimulationHolder)
    cached_lock = Lock()

    @classmethod
    def get_holder(cls, seed: int, generations: int) -> SimulationHolder:
        with cls.cached_lock:
            return cls.cached[(seed, generations)]
