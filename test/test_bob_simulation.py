"""Bobs, their questions and statuses, and the Bob world."""

from random import Random

import pytest

from evo_decision_tree.bob_simulation.Bob import Bob
from evo_decision_tree.bob_simulation.BobSimulation import BobSimulation
from evo_decision_tree.bob_simulation.Meat import Meat
from evo_decision_tree.bob_simulation.questions.impl.distance_to_nearest_food import DistanceToTheNearestFoodQuestion
from evo_decision_tree.bob_simulation.questions.impl.energy import EnergyQuestion
from evo_decision_tree.bob_simulation.questions.impl.speed import SpeedQuestion
from evo_decision_tree.bob_simulation.questions.questions import question_kinds, question_palette
from evo_decision_tree.bob_simulation.statuses.impl.rotate import RotateStatus
from evo_decision_tree.bob_simulation.statuses.impl.stick_to_speed import StickToSpeedStatus
from evo_decision_tree.bob_simulation.statuses.impl.try_to_eat import TryToEatAndSwitchTo
from evo_decision_tree.bob_simulation.statuses.statuses import status_kinds, status_palette
from evo_decision_tree.brain.DecisionTreeBrain import DecisionTreeBrain
from evo_decision_tree.Config import (
    BOB_INITIAL_ANGULAR_SPEED,
    ENERGY_THRESHOLDS,
    FOOD_DISTANCE_THRESHOLDS,
    MEAT_ENERGY_VALUE,
    ROTATE_ANGULAR_SPEEDS,
    SPEED_THRESHOLDS,
    STICK_TO_SPEEDS,
)
from evo_decision_tree.decision_tree.errors import InvalidArgumentError, InvalidStateError
from evo_decision_tree.simulation.Point import Point


@pytest.fixture
def brain():
    return DecisionTreeBrain.create_random(3, question_palette(), status_palette(), Random(7))


@pytest.fixture
def world():
    return BobSimulation(Random(0), meat_spawn_rate=0.0)


def test_question_registry():
    assert sorted(kind.name for kind in question_kinds) == ["distance to the nearest food", "energy", "speed"]
    assert len(question_palette()) == len(ENERGY_THRESHOLDS) + len(SPEED_THRESHOLDS) + len(FOOD_DISTANCE_THRESHOLDS)


def test_status_registry():
    assert sorted(kind.name for kind in status_kinds) == ["rotate", "stick to speed", "try to eat"]
    simple = len(ROTATE_ANGULAR_SPEEDS) + len(STICK_TO_SPEEDS)
    palette = status_palette()
    assert len(palette) == 2 * simple
    assert sum(isinstance(status, TryToEatAndSwitchTo) for status in palette) == simple


def test_questions_compare_by_kind_and_threshold():
    assert EnergyQuestion(0.2) == EnergyQuestion(0.2)
    assert EnergyQuestion(0.2) != SpeedQuestion(0.2)
    assert EnergyQuestion(0.2) != EnergyQuestion(0.4)
    assert len({EnergyQuestion(0.2), EnergyQuestion(0.2), SpeedQuestion(0.2)}) == 2
    assert str(EnergyQuestion(0.2)) == "energy>0.2"


def test_bob_starts_rotating(brain):
    bob = Bob(Point(0.5, 0.5), brain)
    assert bob.local_status == RotateStatus(BOB_INITIAL_ANGULAR_SPEED)
    assert bob.brain is brain


def test_bob_answers_energy_and_speed(brain):
    bob = Bob(Point(0.5, 0.5), brain)
    bob.energy = 0.5
    bob.speed = 0.07
    assert bob.answer(EnergyQuestion(0.4))
    assert not bob.answer(EnergyQuestion(0.6))
    assert bob.answer(SpeedQuestion(0.05))
    assert not bob.answer(SpeedQuestion(0.1))


def test_bob_rejects_foreign_questions(brain):
    with pytest.raises(InvalidArgumentError):
        Bob(Point(0, 0), brain).answer("is it raining?")


def test_bob_rejects_foreign_statuses(brain):
    bob = Bob(Point(0, 0), brain)
    bob.local_status = object()
    with pytest.raises(InvalidStateError):
        bob.status_activity(0.1)


def test_bob_needs_a_brain():
    with pytest.raises(InvalidArgumentError):
        Bob(Point(0, 0), None)


def test_distance_to_food(world, brain):
    bob = world.spawn_bob(brain, 0.5, 0.5)
    world.spawn_meat(0.55, 0.5)
    assert DistanceToTheNearestFoodQuestion(0.1).apply(bob)
    assert not DistanceToTheNearestFoodQuestion(0.02).apply(bob)


def test_distance_to_food_outside_a_simulation(brain):
    assert not DistanceToTheNearestFoodQuestion(0.5).apply(Bob(Point(0, 0), brain))


def test_rotate_status(brain):
    bob = Bob(Point(0, 0), brain)
    RotateStatus(2.5).apply_this_status(bob, 0.1)
    assert bob.angular_speed == 2.5


def test_stick_to_speed_status(brain):
    bob = Bob(Point(0, 0), brain)
    bob.angular_speed = 1.0
    StickToSpeedStatus(0.1, 2.0).apply_this_status(bob, 0.1)
    assert bob.acceleration == pytest.approx(0.2)
    assert bob.angular_speed == 0.0
    bob.speed = 0.3
    StickToSpeedStatus(0.1, 2.0).apply_this_status(bob, 0.1)
    assert bob.acceleration == pytest.approx(-0.4)


def test_try_to_eat_in_reach(world, brain):
    bob = world.spawn_bob(brain, 0.5, 0.5)
    meat = world.spawn_meat(0.505, 0.5)
    bob.energy = 0.5
    status = TryToEatAndSwitchTo(RotateStatus(1.0))
    status.apply_this_status(bob, 0.1)
    assert not meat.alive
    assert bob.energy == pytest.approx(0.5 + MEAT_ENERGY_VALUE - bob.eat_food_energy_cost)
    assert bob.local_status == RotateStatus(1.0)


def test_try_to_eat_out_of_reach(world, brain):
    bob = world.spawn_bob(brain, 0.5, 0.5)
    meat = world.spawn_meat(0.7, 0.5)
    TryToEatAndSwitchTo(RotateStatus(1.0)).apply_this_status(bob, 0.1)
    assert meat.alive
    assert bob.energy == 1.0
    assert bob.local_status == RotateStatus(1.0)


def test_create_populates_the_world():
    world = BobSimulation.create(bob_count=5, brain_depth=2, meat_count=10, seed=1)
    assert len(world.bobs) == 5
    assert len(world.foods) == 10
    assert all(isinstance(food, Meat) for food in world.foods)
    assert all(bob.brain.depth == 2 for bob in world.bobs)


def test_create_with_given_brains(brain):
    world = BobSimulation.create(meat_count=0, seed=1, brains=[brain, brain])
    assert [bob.brain for bob in world.bobs] == [brain, brain]


def test_create_is_reproducible():
    first = BobSimulation.create(bob_count=4, brain_depth=2, meat_count=6, seed=3)
    second = BobSimulation.create(bob_count=4, brain_depth=2, meat_count=6, seed=3)
    for _ in range(20):
        first.update(0.05)
        second.update(0.05)
    columns = ["kind", "x", "y", "energy"]
    assert first.snapshot()[columns].equals(second.snapshot()[columns])


def test_meat_spawns_at_its_rate():
    world = BobSimulation.create(bob_count=0, meat_count=0, seed=2, meat_spawn_rate=4.0)
    world.update(0.5)
    assert len(world.foods) == 2
    world.update(0.1)
    assert len(world.foods) == 2
    world.update(0.2)
    assert len(world.foods) == 3


def test_bobs_think_and_eventually_starve(brain):
    world = BobSimulation.create(meat_count=0, seed=4, brains=[brain], meat_spawn_rate=0.0)
    bob = world.bobs[0]
    world.update(0.6)
    assert bob.brain_timer == 0.0
    assert bob.energy < 1.0
    for _ in range(100000):
        if not world.agents:
            break
        world.update(0.5)
    assert not world.agents
    assert not bob.alive
