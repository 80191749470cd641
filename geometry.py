# geometry.py
import numpy as np

EPS = 1e-9


def normalize(v):
    """Unit vector along v. Returns the zero vector for (near) zero input."""
    v = np.asarray(v, dtype=float)
    mag = np.linalg.norm(v)
    if mag < EPS:
        return np.zeros(2)
    return v / mag


def angle_between(v1, v2):
    """
    Angle in degrees [0, 180] between two vectors.
    Zero-length vectors count as no divergence (0 degrees).
    """
    v1 = np.asarray(v1, dtype=float)
    v2 = np.asarray(v2, dtype=float)
    mag1 = np.linalg.norm(v1)
    mag2 = np.linalg.norm(v2)
    if mag1 == 0 or mag2 == 0:
        return 0.0

    cos_angle = np.dot(v1, v2) / (mag1 * mag2)
    # Rounding can push parallel vectors just past +/-1
    cos_angle = np.clip(cos_angle, -1.0, 1.0)
    return float(np.degrees(np.arccos(cos_angle)))


def rotate(v, angle_deg):
    """Rotate v counter-clockwise by angle_deg."""
    theta = np.radians(angle_deg)
    c, s = np.cos(theta), np.sin(theta)
    x, y = v
    return np.array([x * c - y * s, x * s + y * c])


def cross(v1, v2):
    # z-component of the 3D cross product; > 0 when v2 is counter-clockwise of v1
    return float(v1[0] * v2[1] - v1[1] * v2[0])
