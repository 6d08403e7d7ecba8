# intersect2d/control/mouse_segment.py
import numpy as np

from intersect2d.geometry.primitives import Point, Segment, rot2


class MouseSegment:
    """
    Segment of fixed half-length `radius` spinning around the pointer.
    Usage in animate.py:
        mouse = MouseSegment(radius=50.0)
        mouse.set_target(event.xdata, event.ydata)   # on mouse move
        seg = mouse.update(angle)                    # once per frame
    """
    def __init__(self, radius=50.0, labels=("MouseA", "MouseB")):
        assert radius > 0, "radius must be positive"
        self.radius = float(radius)
        self.labels = labels

        self.target = np.zeros(2)
        self.angle = 0.0
        self.segment = Segment.from_xy([0.0, 0.0], [10.0, 10.0], labels=labels)

    # ---------- public API ----------
    def set_target(self, x, y):
        self.target = np.array([x, y], dtype=float)

    def update(self, angle: float) -> Segment:
        """Rebuild the segment at `angle` (radians) around the current target."""
        self.angle = float(angle)
        offset = rot2(self.angle) @ np.array([self.radius, 0.0])   # (r cos, r sin)
        a = self.target + offset
        b = self.target - offset
        self.segment = Segment(Point(a[0], a[1], self.labels[0]),
                               Point(b[0], b[1], self.labels[1]))
        return self.segment
