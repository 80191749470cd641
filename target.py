# target.py
from entity import KinematicBody
from geometry import rotate


class Target(KinematicBody):
    """The maneuvering body. It only ever turns, so its speed is fixed at launch."""

    def turn(self, angle_deg):
        self.vel = rotate(self.vel, angle_deg)
