import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np


@dataclass(frozen=True)
class FittedEllipse:
    """
    Ellipse model as returned by cv2.fitEllipse:

        ((cx, cy), (width, height), angle_degrees)

    `width` lies along the direction `angle`, `height` perpendicular
    to it. Semi-axes are a = width / 2 and b = height / 2.
    """

    center: Tuple[float, float]
    width: float
    height: float
    angle: float  # degrees

    @classmethod
    def from_rotated_rect(cls, box) -> "FittedEllipse":
        (cx, cy), (w, h), ang = box
        return cls((float(cx), float(cy)), float(w), float(h), float(ang))

    # ------------------------------------------------------------
    # Basic properties
    # ------------------------------------------------------------

    @property
    def a(self) -> float:
        return self.width * 0.5

    @property
    def b(self) -> float:
        return self.height * 0.5

    @property
    def theta(self) -> float:
        return math.radians(self.angle)

    # ------------------------------------------------------------
    # Boundary test
    # ------------------------------------------------------------

    def evaluate(self, points) -> np.ndarray:
        """
        Normalized ellipse equation for each point:

            ((dx cos t + dy sin t)^2 / a^2) + ((dx sin t - dy cos t)^2 / b^2)

        1.0 on the boundary, < 1 inside, > 1 outside.
        """
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        dx = pts[:, 0] - self.center[0]
        dy = pts[:, 1] - self.center[1]

        cos_t = math.cos(self.theta)
        sin_t = math.sin(self.theta)

        u = dx * cos_t + dy * sin_t
        v = dx * sin_t - dy * cos_t
        return u ** 2 / self.a ** 2 + v ** 2 / self.b ** 2

    def is_circle(self, tolerance: float) -> bool:
        """
        True when the two axes differ by at most 2 * tolerance,
        i.e. the radii differ by at most `tolerance`.
        """
        return abs(self.width - self.height) / 2 <= tolerance
