import logging
from collections.abc import Callable, Sequence
from math import ceil
from random import Random
from typing import Optional

import numpy as np
import pandas as pd

from .bob_simulation.Bob import Bob
from .bob_simulation.BobSimulation import BobSimulation
from .bob_simulation.questions.questions import question_palette
from .bob_simulation.statuses.statuses import status_palette
from .brain.DecisionTreeBrain import DecisionTreeBrain
from .Config import *

logger = logging.getLogger(__name__)


def fitness(bob: Bob) -> float:
    return bob.age + max(bob.energy, 0.0)


def run_generation(
    brains: Sequence[DecisionTreeBrain],
    generation_time: float = GENERATION_TIME,
    dt: float = TIME_STEP,
    seed: Optional[int] = None,
) -> list[tuple[DecisionTreeBrain, float]]:
    "Let one Bob per brain live for ``generation_time`` and rank the brains by fitness, best first."
    simulation = BobSimulation.create(brains=brains, seed=seed)
    bobs = simulation.bobs
    for _ in range(ceil(generation_time / dt)):
        simulation.update(dt)
        if not simulation.agents:
            break
    return sorted(((bob.brain, fitness(bob)) for bob in bobs), key=lambda x: x[1], reverse=True)


def breed(
    ranked: Sequence[tuple[DecisionTreeBrain, float]],
    population: int,
    rng: Random,
    mutation_rate: float = MUTATION_RATE,
    elite_fraction: float = ELITE_FRACTION,
) -> list[DecisionTreeBrain]:
    questions, statuses = question_palette(), status_palette()
    parents = [brain for brain, _ in ranked[: max(1, int(len(ranked) * elite_fraction))]]
    brains = list(parents)
    while len(brains) < population:
        child = DecisionTreeBrain.cross(rng.choice(parents), rng.choice(parents), rng)
        brains.append(child.mutate(questions, statuses, mutation_rate, rng))
    return brains[:population]


def evolve(
    generations: int,
    population: int = BOB_COUNT,
    depth: int = BRAIN_DEPTH,
    seed: Optional[int] = None,
    callback: Optional[Callable[[int, int], None]] = None,
) -> tuple[list[DecisionTreeBrain], pd.DataFrame]:
    """Evolve ``population`` brains for ``generations`` rounds.

    Returns the last population (best first) and one row of fitness statistics per generation.
    """
    rng = Random(seed)
    questions, statuses = question_palette(), status_palette()
    brains = [DecisionTreeBrain.create_random(depth, questions, statuses, rng) for _ in range(population)]
    rows = []
    if callback is not None:
        callback(0, generations)
    for generation in range(generations):
        ranked = run_generation(brains, seed=rng.randrange(1 << 32))
        scores = np.array([score for _, score in ranked], dtype=np.float64)
        rows.append({"generation": generation, "best": scores.max(), "mean": scores.mean(), "worst": scores.min()})
        logger.info("generation %d: best %.2f, mean %.2f", generation, scores.max(), scores.mean())
        brains = breed(ranked, population, rng)
        if callback is not None:
            callback(generation + 1, generations)
    return brains, pd.DataFrame(rows, columns=["generation", "best", "mean", "worst"])
