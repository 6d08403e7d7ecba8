from dataclasses import dataclass, field

from intersect2d.control.mouse_segment import MouseSegment
from intersect2d.geometry.intersection import intersect

@dataclass
class Scene:
    segments: list                                        # list of static Segment
    mouse: MouseSegment = field(default_factory=MouseSegment)
    time_scale: float = 0.001                             # rad per ms of animation time

    # ------- utilities -------
    @property
    def all_segments(self):
        return list(self.segments) + [self.mouse.segment]  # mouse segment last

    def find_intersections(self):
        """Return list of (i, j, Point) over all unordered pairs i < j that intersect."""
        segs = self.all_segments
        hits = []
        for i in range(len(segs)):
            for j in range(i+1, len(segs)):
                p = intersect(segs[i], segs[j])
                if p is None:
                    continue
                hits.append((i, j, p))
        return hits

    # ------- one frame -------
    def step(self, t_ms):
        self.mouse.update(t_ms * self.time_scale)
        return self.find_intersections()
