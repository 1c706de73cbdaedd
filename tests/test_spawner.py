import pytest

from barrel_dash.geometry import lane_to_x
from barrel_dash.spawner import Spawner, make_lane_source
from tests.helpers import FixedLanes


def test_first_spawn_is_due_immediately(config):
    spawner = Spawner(config, FixedLanes(0))
    assert spawner.last_spawn_ms is None
    assert spawner.due(0)


def test_interval_must_be_strictly_exceeded(config):
    spawner = Spawner(config, FixedLanes(0))
    spawner.spawn(500)
    assert spawner.last_spawn_ms == 500
    assert not spawner.due(1000)
    assert not spawner.due(1500)
    assert spawner.due(1501)


def test_spawned_obstacle_sits_above_top_edge(config):
    spawner = Spawner(config, FixedLanes(2))
    ob = spawner.spawn(0)
    assert ob.lane == 2
    assert ob.y == -config.obstacle_height
    assert ob.y + ob.height <= 0
    assert ob.x == pytest.approx(lane_to_x(config, 2, config.obstacle_width))
    assert (ob.width, ob.height) == (config.obstacle_width, config.obstacle_height)


def test_seeded_sources_repeat_lane_sequence(config):
    a = Spawner(config, make_lane_source(99))
    b = Spawner(config, make_lane_source(99))
    lanes_a = [a.spawn(t).lane for t in range(50)]
    lanes_b = [b.spawn(t).lane for t in range(50)]
    assert lanes_a == lanes_b
    assert set(lanes_a) <= set(range(config.lanes))


def test_lanes_cover_every_lane_eventually(config):
    spawner = Spawner(config, make_lane_source(3))
    lanes = {spawner.spawn(t).lane for t in range(300)}
    assert lanes == set(range(config.lanes))


def test_reset_makes_next_spawn_due(config):
    spawner = Spawner(config, FixedLanes(1))
    spawner.spawn(10_000)
    assert not spawner.due(10_500)
    spawner.reset()
    assert spawner.due(10_500)
