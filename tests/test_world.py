import math
import random
from dataclasses import replace

import pytest

from blob.agent import AgentTuning
from blob.fear import fear
from noisefield.value_noise import ValueNoise
from world.props import Held, Prop
from world.world import PropView, initialize, reset, step
from conftest import FAR_AWAY, FixedRandom, make_world


def _wander(i: int, w: float = 480.0, h: float = 320.0):
    # pointer sweeping a figure eight across the canvas
    return (w / 2 + math.sin(i * 0.021) * w * 0.45, h / 2 + math.sin(i * 0.037) * h * 0.45)


def test_initialize_scatters_props_inside_spawn_area():
    world = initialize(prop_count=12, w=480, h=320, rng=random.Random(3))
    assert len(world.props) == 12
    for p in world.props:
        assert 30 <= p.x <= 450
        assert 30 <= p.y <= 290
        assert 8 <= p.radius <= 22
        assert not p.held
    assert world.score == 0
    assert world.agent_pos == (240.0, 160.0)
    assert world.agent_vel == (0.0, 0.0)


def test_initialize_rejects_bad_arguments():
    with pytest.raises(ValueError):
        initialize(prop_count=-1)
    with pytest.raises(ValueError):
        initialize(w=40, h=320)


def test_step_reports_single_fear_value():
    world = make_world()
    result = step(world, (240.0, 160.0), 1 / 60)
    assert result.fear == 1.0
    assert result.world is world

    # the value handed to the renderer is the one steering used, from the pre-move position
    before = world.agent_pos
    result = step(world, (200.0, 160.0), 1 / 60)
    assert result.fear == pytest.approx(fear(before, (200.0, 160.0), world.agent.tuning.fear_radius))


def test_clock_advances_by_fixed_amount_regardless_of_dt():
    a = make_world()
    b = make_world()
    for _ in range(10):
        step(a, (200.0, 150.0), 1 / 30)
        step(b, (200.0, 150.0), 1 / 144)
    assert a.clock == pytest.approx(0.1)
    assert a.clock == b.clock
    assert a.agent_pos == b.agent_pos
    assert a.elapsed == pytest.approx(10 / 30)
    assert a.ticks == b.ticks == 10


def test_calm_world_velocity_decays():
    world = make_world()
    world.agent.vx, world.agent.vy = 3.0, 2.0
    prev = world.agent.speed
    for _ in range(50):
        result = step(world, FAR_AWAY, 1 / 60)
        assert result.fear == 0.0
        assert world.agent.speed < prev
        prev = world.agent.speed
    assert world.agent.speed < 0.1


def test_overlapping_small_prop_stolen_and_scored(always_steal):
    prop = Prop(x=245.0, y=160.0, radius=10.0)
    world = make_world(props=[prop], tuning=always_steal)

    result = step(world, FAR_AWAY, 1 / 60)

    assert result.stolen == 1
    assert world.score == 1
    assert isinstance(prop.state, Held)


def test_overlapping_large_prop_never_stolen(always_steal):
    prop = Prop(x=245.0, y=160.0, radius=20.0)
    world = make_world(props=[prop], tuning=always_steal)

    result = step(world, FAR_AWAY, 1 / 60)

    assert result.stolen == 0
    assert world.score == 0
    assert not prop.held
    assert prop.vx > 0.0


def test_held_prop_falls_off_after_its_lifetime(always_steal):
    prop = Prop(x=245.0, y=160.0, radius=10.0)
    world = make_world(props=[prop], tuning=always_steal)
    step(world, FAR_AWAY)
    assert prop.state.remaining_life == 180

    for _ in range(179):
        step(world, FAR_AWAY)
        assert prop.held
        assert prop.state.remaining_life > 0
    step(world, FAR_AWAY)
    assert not prop.held
    assert world.score == 1


def test_long_run_invariants():
    tuning = replace(AgentTuning(), steal_chance=1.0)
    world = initialize(12, 480, 320, rng=random.Random(21), noise=ValueNoise(seed=21), tuning=tuning)
    # one stealable prop under the blob so the held path is always exercised
    world.props[0] = Prop(x=245.0, y=160.0, radius=10.0)
    pad_a = tuning.wall_pad
    last_score = 0
    saw_held = False

    for i in range(3000):
        was_free = [not p.held for p in world.props]
        result = step(world, _wander(i), 1 / 60)

        a = world.agent
        assert a.speed <= tuning.max_speed + 1e-9
        assert pad_a <= a.x <= world.w - pad_a
        assert pad_a <= a.y <= world.h - pad_a

        assert world.score >= last_score
        assert world.score - last_score == result.stolen
        last_score = world.score

        for p, free_before in zip(world.props, was_free):
            if p.held:
                saw_held = True
                d = math.hypot(p.x - a.x, p.y - a.y)
                assert d == pytest.approx(p.state.orbit_radius)
                assert p.state.remaining_life > 0
            elif free_before:
                assert 20.0 <= p.x <= world.w - 20.0
                assert 20.0 <= p.y <= world.h - 20.0

    assert saw_held
    assert world.score > 0


def test_same_inputs_same_world():
    def run():
        world = initialize(12, 480, 320, rng=random.Random(5), noise=ValueNoise(seed=5))
        for i in range(400):
            step(world, _wander(i), 1 / 60)
        return world.agent_pos, [tuple(v) for v in world.prop_views()], world.score

    assert run() == run()


def test_reset_zeroes_score_and_rescatters_props(always_steal):
    world = initialize(12, 480, 320, rng=random.Random(8), noise=ValueNoise(seed=8), tuning=always_steal)
    world.props[0] = Prop(x=245.0, y=160.0, radius=10.0)
    for i in range(1500):
        step(world, _wander(i), 1 / 60)
    assert world.score > 0

    agent_before = (world.agent.x, world.agent.y, world.agent.vx, world.agent.vy)
    old_props = list(world.props)
    reset(world)

    assert world.score == 0
    assert len(world.props) == 12
    assert all(p not in old_props for p in world.props)
    assert all(not p.held for p in world.props)
    assert (world.agent.x, world.agent.y, world.agent.vx, world.agent.vy) == agent_before


def test_prop_views_expose_render_fields():
    world = make_world(props=[
        Prop(x=10.0, y=20.0, radius=9.0),
        Prop(x=30.0, y=40.0, radius=12.0, state=Held(0.0, 15.0, 10)),
    ])
    assert list(world.prop_views()) == [
        PropView(10.0, 20.0, 9.0, False),
        PropView(30.0, 40.0, 12.0, True),
    ]
    assert world.held_count() == 1


def test_seeded_rng_alone_makes_world_repeatable():
    def run():
        world = initialize(12, 480, 320, rng=random.Random(5))
        for i in range(200):
            step(world, _wander(i), 1 / 60)
        return world.agent_pos, [tuple(v) for v in world.prop_views()], world.score

    assert run() == run()


def test_freshly_stolen_prop_starts_on_its_orbit(always_steal):
    prop = Prop(x=270.0, y=160.0, radius=10.0)
    world = make_world(props=[prop], tuning=always_steal)

    result = step(world, FAR_AWAY, 1 / 60)

    assert result.stolen == 1
    assert prop.held
    ax, ay = world.agent_pos
    assert math.hypot(prop.x - ax, prop.y - ay) == pytest.approx(prop.state.orbit_radius)
