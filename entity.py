# entity.py
import numpy as np


class KinematicBody:
    """
    Point mass in the x/y plane. Velocity is in meters per tick, so one
    integration step is a plain position += velocity.
    The body never changes its own speed; its controller does.
    """
    def __init__(self, pos, vel):
        self.pos = np.array(pos, dtype=float)
        self.vel = np.array(vel, dtype=float)

    @property
    def speed(self):
        return float(np.linalg.norm(self.vel))

    @property
    def altitude(self):
        return float(self.pos[1])

    def integrate(self):
        self.pos += self.vel

    def distance_to(self, other):
        return float(np.linalg.norm(self.pos - other.pos))

    def __repr__(self):
        return f"{type(self).__name__}(pos={self.pos.tolist()}, vel={self.vel.tolist()})"
