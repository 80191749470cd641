# evasion.py
import numpy as np

import config


class EvasionController:
    """
    Target-side heading controller.

    Every tick the target turns by a blend of two angles:
      - a random jink drawn uniformly from [-max_deviation, +max_deviation]
      - a proportional correction that pulls it back to the reference altitude

    weight = 0 gives a purely random walk, weight = 1 a deterministic
    altitude hold. Speed is never touched, only the heading.
    """
    def __init__(self, rng=None, reference_altitude=config.REFERENCE_ALTITUDE,
                 weight=config.BLEND_WEIGHT, gain=config.HEIGHT_GAIN,
                 max_deviation=config.MAX_DEVIATION):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.reference_altitude = reference_altitude
        self.weight = weight
        self.gain = gain
        self.max_deviation = max_deviation

    @classmethod
    def from_params(cls, params, rng):
        return cls(rng=rng,
                   reference_altitude=params.reference_altitude,
                   weight=params.blend_weight,
                   gain=params.gain,
                   max_deviation=params.max_deviation)

    def random_deviation(self):
        return float(self.rng.uniform(-self.max_deviation, self.max_deviation))

    def height_correction(self, altitude):
        # Below the reference (negative error) -> positive (upward) turn
        return -(altitude - self.reference_altitude) * self.gain

    def blend(self, random_angle, correction_angle):
        return random_angle * (1.0 - self.weight) + correction_angle * self.weight

    def update(self, target):
        """Turn the target for this tick. Returns the applied angle in degrees."""
        angle = self.blend(self.random_deviation(), self.height_correction(target.altitude))
        target.turn(angle)
        return angle
