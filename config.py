from dataclasses import dataclass, replace
from typing import Optional, Tuple

# ============================================================================
# ENGAGEMENT SETTINGS
# ============================================================================
COLLISION_THRESHOLD = 1.0   # Meters - stop when separation drops below this
MAX_TICKS = 1000            # Step budget

# ============================================================================
# TARGET SETTINGS
# ============================================================================
TARGET_START_POS = (0.0, 20.0)  # 20m height
TARGET_START_VEL = (2.0, 0.0)   # Horizontal, m/tick

# Evasion controller
REFERENCE_ALTITUDE = 20.0   # Altitude the height correction pulls toward
BLEND_WEIGHT = 0.6          # 0 = pure random jink, 1 = pure height hold
HEIGHT_GAIN = 0.5           # Degrees of turn per meter of height error
MAX_DEVIATION = 5.0         # Random heading jink range (+/- degrees)

# ============================================================================
# INTERCEPTOR SETTINGS
# ============================================================================
INTERCEPTOR_SPEED = 2.5
INTERCEPTOR_START_POS = (0.0, 0.0)  # At ground level
INTERCEPTOR_START_VEL = (0.0, 0.0)

# Random start rectangle (x_min, x_max, y_min, y_max)
START_BOUNDS = (-20.0, 20.0, 0.0, 5.0)

# Guidance
MIN_APPROACH_ANGLE = 5.0    # Degrees - anything at or below is a tail chase
ANGLE_BUFFER = 0.5          # Extra rotation applied past the minimum

GUIDANCE_MODES = ("lead", "pure")


@dataclass(frozen=True)
class SimParams:
    """Parameters for a single engagement. Immutable for the run."""
    collision_threshold: float = COLLISION_THRESHOLD
    max_ticks: int = MAX_TICKS

    reference_altitude: float = REFERENCE_ALTITUDE
    blend_weight: float = BLEND_WEIGHT
    gain: float = HEIGHT_GAIN
    max_deviation: float = MAX_DEVIATION
    evasion: bool = True

    interceptor_speed: float = INTERCEPTOR_SPEED
    min_approach_angle: float = MIN_APPROACH_ANGLE
    angle_buffer: float = ANGLE_BUFFER
    guidance: str = "lead"

    target_pos: Tuple[float, float] = TARGET_START_POS
    target_vel: Tuple[float, float] = TARGET_START_VEL
    interceptor_pos: Tuple[float, float] = INTERCEPTOR_START_POS
    interceptor_vel: Tuple[float, float] = INTERCEPTOR_START_VEL
    randomize_start: bool = False
    start_bounds: Tuple[float, float, float, float] = START_BOUNDS

    seed: Optional[int] = None

    def __post_init__(self):
        if self.guidance not in GUIDANCE_MODES:
            raise ValueError(f"unknown guidance mode {self.guidance!r}, expected one of {GUIDANCE_MODES}")
        if not 0.0 <= self.blend_weight <= 1.0:
            raise ValueError(f"blend_weight must be within [0, 1], got {self.blend_weight}")
        if self.max_ticks < 1:
            raise ValueError(f"max_ticks must be at least 1, got {self.max_ticks}")
        if self.interceptor_speed < 0:
            raise ValueError(f"interceptor_speed must be non-negative, got {self.interceptor_speed}")
        if self.max_deviation < 0 or self.min_approach_angle < 0 or self.angle_buffer < 0:
            raise ValueError("angle parameters must be non-negative")
        x_min, x_max, y_min, y_max = self.start_bounds
        if x_min > x_max or y_min > y_max:
            raise ValueError(f"start_bounds are inverted: {self.start_bounds}")

    def with_overrides(self, **overrides):
        """Copy with the non-None overrides applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)


# ============================================================================
# PRESETS
# ============================================================================
# The corrective (0.6) and purely stochastic (0.0) blend weights both came out
# of earlier tuning; neither is canonical, so both ship as presets.
PRESETS = {
    "pure_pursuit": SimParams(guidance="pure", evasion=False),
    "lead_pursuit": SimParams(guidance="lead", evasion=False),
    "evasive": SimParams(guidance="lead", evasion=True, blend_weight=0.6),
    "random_evasive": SimParams(guidance="lead", evasion=True, blend_weight=0.0),
}
DEFAULT_PRESET = "evasive"


def get_preset(name):
    try:
        return PRESETS[name]
    except KeyError:
        raise ValueError(f"unknown preset {name!r}, expected one of {sorted(PRESETS)}") from None
