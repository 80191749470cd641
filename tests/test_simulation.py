import numpy as np
import pytest

from config import PRESETS, SimParams
from simulation import Collision, SimState, Simulation, approach_qualifies, run


def scenario_a():
    # Pure pursuit, straight-flying target
    return SimParams(guidance="pure", evasion=False)


def scenario_b():
    return SimParams(guidance="lead", evasion=False)


class TestScenarios:
    def test_pure_pursuit_ends_in_tail_chase(self):
        sim = Simulation(scenario_a())
        _, _, collision = sim.run()
        assert sim.state is SimState.COLLIDED
        assert collision is not None
        assert collision.tick < 1000
        assert collision.distance < 1.0
        assert collision.angle < 5.0
        assert not collision.qualified

    def test_lead_pursuit_collides_with_wide_angle(self):
        _, _, pure = run(scenario_a())
        _, _, lead = run(scenario_b())
        assert lead is not None
        assert lead.angle > 5.0
        assert lead.qualified
        assert lead.tick <= pure.tick

    def test_height_hold_keeps_velocity_constant(self):
        params = SimParams(evasion=True, blend_weight=1.0, reference_altitude=20.0,
                           target_pos=(0.0, 20.0), target_vel=(2.0, 0.0),
                           collision_threshold=-1.0, max_ticks=200, seed=5)
        sim = Simulation(params)
        while not sim.finished:
            sim.step()
            assert sim.target.vel.tolist() == [2.0, 0.0]
        t_data = sim.target_trajectory
        assert np.all(t_data[:, 1] == 20.0)
        assert t_data[-1, 0] == pytest.approx(400.0)

    def test_negative_threshold_exhausts_budget(self):
        params = SimParams(collision_threshold=-1.0, max_ticks=50, seed=1)
        sim = Simulation(params)
        t_data, m_data, collision = sim.run()
        assert collision is None
        assert sim.state is SimState.EXHAUSTED
        assert sim.tick == 50
        assert len(t_data) == len(m_data) == 51


class TestDriver:
    def test_seeded_runs_are_identical(self):
        params = PRESETS["random_evasive"].with_overrides(seed=42, randomize_start=True)
        t1, m1, c1 = run(params)
        t2, m2, c2 = run(params)
        assert np.array_equal(t1, t2)
        assert np.array_equal(m1, m2)
        assert c1 == c2

    def test_different_seeds_diverge(self):
        base = PRESETS["random_evasive"].with_overrides(collision_threshold=-1.0, max_ticks=30)
        t1, _, _ = run(base.with_overrides(seed=1))
        t2, _, _ = run(base.with_overrides(seed=2))
        assert not np.array_equal(t1, t2)

    def test_trajectories_seeded_with_start_positions(self):
        params = SimParams(interceptor_pos=(5.0, 1.0), max_ticks=3, collision_threshold=-1.0)
        t_data, m_data, _ = run(params)
        assert t_data[0].tolist() == [0.0, 20.0]
        assert m_data[0].tolist() == [5.0, 1.0]

    def test_collision_at_tick_zero(self):
        params = SimParams(interceptor_pos=(0.0, 19.5), evasion=False)
        t_data, m_data, collision = run(params)
        assert collision.tick == 0
        assert collision.point == (0.0, 20.0)
        # Interceptor still at rest, so there is no divergence to measure
        assert collision.angle == 0.0
        assert len(t_data) == len(m_data) == 1

    def test_collision_point_is_last_target_sample(self):
        t_data, _, collision = run(scenario_b())
        assert collision.point == tuple(t_data[-1].tolist())
        assert len(t_data) == collision.tick + 1

    def test_randomized_start_within_bounds(self):
        bounds = (-3.0, 4.0, 1.0, 2.0)
        for seed in range(20):
            params = SimParams(randomize_start=True, start_bounds=bounds, seed=seed)
            x, y = Simulation(params).interceptor.pos
            assert bounds[0] <= x <= bounds[1]
            assert bounds[2] <= y <= bounds[3]

    def test_interceptor_holds_cruise_speed(self):
        sim = Simulation(PRESETS["evasive"].with_overrides(seed=9, collision_threshold=-1.0, max_ticks=40))
        while not sim.finished:
            sim.step()
            assert sim.interceptor.speed == pytest.approx(2.5)
            assert sim.target.speed == pytest.approx(2.0)

    def test_step_after_finish_raises(self):
        sim = Simulation(SimParams(max_ticks=1, collision_threshold=-1.0))
        assert sim.step() is SimState.EXHAUSTED
        with pytest.raises(RuntimeError):
            sim.step()

    def test_evasion_disabled_has_no_controller(self):
        assert Simulation(SimParams(evasion=False)).evasion is None

    def test_verbose_prints_collision(self, capsys):
        Simulation(scenario_b(), verbose=True).run()
        assert "COLLISION" in capsys.readouterr().out


def test_approach_qualifies():
    assert approach_qualifies(5.1)
    assert not approach_qualifies(5.0)
    assert not approach_qualifies(0.0)
    assert approach_qualifies(6.0, minimum=5.5)


def test_collision_qualified_uses_its_minimum():
    assert Collision(3, (0.0, 0.0), 7.0, 0.5).qualified
    assert not Collision(3, (0.0, 0.0), 7.0, 0.5, min_approach_angle=10.0).qualified
