from .primitives import Segment

def build_segments(width=800, height=600):
    """Two static labelled segments crossing in the middle of a width x height canvas."""
    ab = Segment.from_xy([0.25*width, 0.25*height], [0.75*width, 0.75*height], labels=("A", "B"))
    cd = Segment.from_xy([0.25*width, 0.75*height], [0.75*width, 0.25*height], labels=("C", "D"))
    return [ab, cd]
