# missile.py
import numpy as np

from entity import KinematicBody


class Interceptor(KinematicBody):
    def __init__(self, pos, vel, cruise_speed):
        super().__init__(pos, vel)
        self.cruise_speed = float(cruise_speed)

    def steer(self, heading):
        """
        Point the interceptor along a unit heading at cruise speed.
        A zero heading means no heading change: velocity is kept as is.
        """
        heading = np.asarray(heading, dtype=float)
        if not heading.any():
            return
        self.vel = heading * self.cruise_speed
