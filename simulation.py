# simulation.py
from enum import Enum
from typing import NamedTuple

import numpy as np

import config
from evasion import EvasionController
from geometry import angle_between
from guidance import make_guidance
from missile import Interceptor
from report import console
from target import Target


class SimState(Enum):
    RUNNING = "RUNNING"
    COLLIDED = "COLLIDED"
    EXHAUSTED = "EXHAUSTED"


def approach_qualifies(angle, minimum=config.MIN_APPROACH_ANGLE):
    """True when the terminal geometry is not a tail chase."""
    return angle > minimum


class Collision(NamedTuple):
    tick: int
    point: tuple
    angle: float
    distance: float
    min_approach_angle: float = config.MIN_APPROACH_ANGLE

    @property
    def qualified(self):
        return approach_qualifies(self.angle, self.min_approach_angle)


class Simulation:
    """
    Drives one engagement tick by tick:

        collision test -> evasion -> guidance -> integrate -> record

    until the bodies close inside the collision threshold (COLLIDED) or
    the tick budget runs out (EXHAUSTED).
    """
    def __init__(self, params=None, rng=None, verbose=False):
        self.params = params if params is not None else config.SimParams()
        # One random stream per run keeps seeded runs reproducible
        self.rng = rng if rng is not None else np.random.default_rng(self.params.seed)
        self.verbose = verbose

        p = self.params
        self.target = Target(p.target_pos, p.target_vel)
        self.interceptor = Interceptor(self._start_position(), p.interceptor_vel, p.interceptor_speed)

        self.evasion = EvasionController.from_params(p, self.rng) if p.evasion else None
        self.guidance = make_guidance(p)

        self.state = SimState.RUNNING
        self.tick = 0
        self.collision = None
        self.t_log = [self.target.pos.copy()]
        self.m_log = [self.interceptor.pos.copy()]

    def _start_position(self):
        p = self.params
        if not p.randomize_start:
            return p.interceptor_pos
        x_min, x_max, y_min, y_max = p.start_bounds
        return (self.rng.uniform(x_min, x_max), self.rng.uniform(y_min, y_max))

    @property
    def finished(self):
        return self.state is not SimState.RUNNING

    @property
    def target_trajectory(self):
        return np.array(self.t_log)

    @property
    def interceptor_trajectory(self):
        return np.array(self.m_log)

    def step(self):
        """Advance one tick. Returns the state after the tick."""
        if self.finished:
            raise RuntimeError(f"simulation already finished ({self.state.value})")

        # 1. Collision test on the live (pre-integration) positions
        dist = self.interceptor.distance_to(self.target)
        if dist < self.params.collision_threshold:
            angle = angle_between(self.target.vel, self.interceptor.vel)
            self.collision = Collision(self.tick, tuple(self.target.pos.tolist()), angle, dist,
                                       self.params.min_approach_angle)
            self.state = SimState.COLLIDED
            if self.verbose:
                console.print(f"[bold green][T+{self.tick:04d}] *** COLLISION ***[/bold green] "
                              f"Miss {dist:.2f} m, Angle {angle:.2f}°")
            return self.state

        # 2. Controllers
        if self.evasion is not None:
            self.evasion.update(self.target)
        self.guidance.update(self.interceptor, self.target)

        # 3. Physics
        self.target.integrate()
        self.interceptor.integrate()

        # 4. Log
        self.t_log.append(self.target.pos.copy())
        self.m_log.append(self.interceptor.pos.copy())

        self.tick += 1
        if self.tick >= self.params.max_ticks:
            self.state = SimState.EXHAUSTED
            if self.verbose:
                console.print(f"[bold red][T+{self.tick:04d}] TICK BUDGET EXHAUSTED - no collision.[/bold red]")
        return self.state

    def run(self):
        """Run to completion. Returns (target_trajectory, interceptor_trajectory, collision)."""
        if self.verbose:
            console.print(f"[dim]Guidance: {self.params.guidance} | "
                          f"Evasion: {'on' if self.evasion else 'off'} | "
                          f"Budget: {self.params.max_ticks} ticks[/dim]")
        while not self.finished:
            self.step()
        return self.target_trajectory, self.interceptor_trajectory, self.collision


def run(params=None, verbose=False):
    return Simulation(params, verbose=verbose).run()
