import numpy as np
from dataclasses import dataclass


def rot2(theta: float) -> np.ndarray:
    c, s = np.cos(theta), np.sin(theta)
    return np.array([[c, -s],
                     [s,  c]])


@dataclass(frozen=True)
class Point:
    """Immutable 2D point. The label is for display only and is not part of the geometry."""
    x: float
    y: float
    label: str | None = None

    def __post_init__(self):
        # frozen dataclass: coerce through object.__setattr__
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)


@dataclass(frozen=True)
class Segment:
    """Ordered pair of endpoints (a, b). a == b is allowed (degenerate)."""
    a: Point
    b: Point

    @classmethod
    def from_xy(cls, a_xy, b_xy, labels=None):
        la, lb = (None, None) if labels is None else labels
        return cls(Point(a_xy[0], a_xy[1], la), Point(b_xy[0], b_xy[1], lb))

    @property
    def is_degenerate(self) -> bool:
        return self.a.x == self.b.x and self.a.y == self.b.y

    def __iter__(self):
        # lets a Segment be passed wherever an (A, B) pair is expected
        yield self.a
        yield self.b

    def __getitem__(self, i):
        return (self.a, self.b)[i]

    def __len__(self):
        return 2

    def as_array(self) -> np.ndarray:
        return np.vstack([self.a.as_array(), self.b.as_array()])  # (2,2)
