# guidance.py
from typing import NamedTuple

import numpy as np

import config
from geometry import EPS, angle_between, cross, normalize, rotate


class Intercept(NamedTuple):
    """A feasible straight-line intercept, `time` ticks from now."""
    time: float


def solve_intercept_time(r, v, s):
    """
    Earliest time at which a pursuer flying straight at speed s meets a
    target at relative position r moving with constant velocity v.

    Solves (v.v - s^2) t^2 + 2 (r.v) t + r.r = 0 and keeps the smallest
    strictly positive root. Returns an Intercept, or None if no positive
    real root exists.
    """
    r = np.asarray(r, dtype=float)
    v = np.asarray(v, dtype=float)

    a = np.dot(v, v) - s * s
    b = 2.0 * np.dot(r, v)
    c = np.dot(r, r)

    if abs(a) < EPS:
        # Linear case: bt + c = 0
        if b == 0:
            return None
        t = -c / b
        return Intercept(float(t)) if t > 0 else None

    disc = b * b - 4.0 * a * c
    if disc < 0:
        return None

    sqrt_disc = np.sqrt(disc)
    roots = ((-b - sqrt_disc) / (2.0 * a), (-b + sqrt_disc) / (2.0 * a))
    positive = [t for t in roots if t > 0]
    if not positive:
        return None
    return Intercept(float(min(positive)))


def aim_point(pursuer_pos, speed, target_pos, target_vel):
    """Predicted intercept point, or the target's current position (pure pursuit fallback)."""
    target_pos = np.asarray(target_pos, dtype=float)
    target_vel = np.asarray(target_vel, dtype=float)

    solution = solve_intercept_time(target_pos - pursuer_pos, target_vel, speed)
    if solution is None:
        return target_pos.copy()
    return target_pos + target_vel * solution.time


def heading_to(origin, point):
    # normalize() already returns zero when we are sitting on the point
    return normalize(np.asarray(point, dtype=float) - np.asarray(origin, dtype=float))


def enforce_approach_angle(heading, target_vel,
                           minimum=config.MIN_APPROACH_ANGLE,
                           buffer=config.ANGLE_BUFFER):
    """
    Keep the heading from running parallel to the target's velocity.

    If the angle between them is at or below `minimum`, the heading is
    rotated by minimum + buffer degrees away from the target velocity
    (counter-clockwise when the heading already sits on the
    counter-clockwise side or exactly on it, clockwise otherwise).
    """
    heading = np.asarray(heading, dtype=float)
    if not heading.any() or not np.any(target_vel):
        return heading

    if angle_between(heading, target_vel) > minimum:
        return heading

    side = 1.0 if cross(target_vel, heading) >= 0 else -1.0
    return normalize(rotate(heading, side * (minimum + buffer)))


class PurePursuitGuidance:
    """Steer straight at the target's current position. Ends in a tail chase."""

    def heading(self, interceptor, target):
        return heading_to(interceptor.pos, target.pos)

    def update(self, interceptor, target):
        heading = self.heading(interceptor, target)
        interceptor.steer(heading)
        return heading


class LeadPursuitGuidance(PurePursuitGuidance):
    """
    Steer at the predicted intercept point, then push the heading out of the
    tail-chase cone around the target's velocity.

    The closing speed used for the prediction is the interceptor's current
    speed, so a pursuer that starts at rest aims at the target's current
    position on its first tick.
    """
    def __init__(self, min_approach_angle=config.MIN_APPROACH_ANGLE,
                 angle_buffer=config.ANGLE_BUFFER):
        self.min_approach_angle = min_approach_angle
        self.angle_buffer = angle_buffer

    def heading(self, interceptor, target):
        aim = aim_point(interceptor.pos, interceptor.speed, target.pos, target.vel)
        heading = heading_to(interceptor.pos, aim)
        return enforce_approach_angle(heading, target.vel,
                                      self.min_approach_angle, self.angle_buffer)


def make_guidance(params):
    if params.guidance == "pure":
        return PurePursuitGuidance()
    return LeadPursuitGuidance(params.min_approach_angle, params.angle_buffer)
