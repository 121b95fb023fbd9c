import logging
from typing import Optional

import numpy as np
import pandas as pd

from ..Config import NEARBY_RADIUS
from ..decision_tree.errors import InvalidArgumentError
from .Agent import Agent
from .Entity import Entity
from .Food import Food
from .Point import Point, toroidal_distances

logger = logging.getLogger(__name__)


class Simulation:
    def __init__(self) -> None:
        self.entities: list[Entity] = []
        self.time = 0.0

    def add_entity(self, entity: Entity) -> None:
        if entity is None:
            raise InvalidArgumentError("entity must not be None")
        entity.simulation = self
        self.entities.append(entity)

    def add_agent(self, agent: Agent) -> None:
        if not isinstance(agent, Agent):
            raise InvalidArgumentError(f"expected an Agent, got {type(agent).__name__}")
        self.add_entity(agent)

    def add_food(self, food: Food) -> None:
        if not isinstance(food, Food):
            raise InvalidArgumentError(f"expected a Food, got {type(food).__name__}")
        self.add_entity(food)

    @property
    def agents(self) -> list[Agent]:
        return [e for e in self.entities if isinstance(e, Agent)]

    @property
    def foods(self) -> list[Food]:
        return [e for e in self.entities if isinstance(e, Food)]

    def update(self, dt: float) -> None:
        if dt <= 0:
            raise InvalidArgumentError(f"time step must be positive, got {dt}")
        for entity in list(self.entities):
            if entity.alive:
                entity.update(dt)
        before = len(self.entities)
        self.entities = [e for e in self.entities if e.alive]
        if len(self.entities) != before:
            logger.debug("t=%.2f: %d entities removed", self.time, before - len(self.entities))
        self.time += dt

    def get_entities_nearby(self, position: Point, radius: float = NEARBY_RADIUS) -> list[Entity]:
        "Living entities within ``radius`` of ``position``, nearest first."
        return [entity for entity, _ in self._nearby(position, radius, self.entities)]

    def nearest_food(self, position: Point, radius: float = NEARBY_RADIUS) -> Optional[tuple[Food, float]]:
        nearby = self._nearby(position, radius, self.foods)
        return nearby[0] if nearby else None

    @staticmethod
    def _nearby(position: Point, radius: float, entities: list[Entity]) -> list[tuple[Entity, float]]:
        if position is None:
            raise InvalidArgumentError("position must not be None")
        entities = [e for e in entities if e.alive]
        if not entities:
            return []
        xs = np.fromiter((e.x for e in entities), dtype=np.float64, count=len(entities))
        ys = np.fromiter((e.y for e in entities), dtype=np.float64, count=len(entities))
        distances = toroidal_distances(position.x, position.y, xs, ys)
        order = np.argsort(distances, kind="stable")
        return [(entities[i], float(distances[i])) for i in order if distances[i] <= radius]

    def snapshot(self) -> pd.DataFrame:
        return pd.DataFrame(
            [
                {
                    "id": e.id,
                    "kind": type(e).__name__,
                    "x": e.x,
                    "y": e.y,
                    "radius": e.radius,
                    "energy": getattr(e, "energy", getattr(e, "health", 0.0)),
                }
                for e in self.entities
            ],
            columns=["id", "kind", "x", "y", "radius", "energy"],
        )
