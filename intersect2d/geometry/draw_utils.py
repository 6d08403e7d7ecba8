# intersect2d/geometry/draw_utils.py
import numpy as np
from matplotlib.collections import LineCollection
from matplotlib.patches import Circle


class DrawUtils:

    @staticmethod
    def draw_segments(ax, segments, color="k", lw=1.0, zorder=2):
        """Draws the segments as a LineCollection and returns the artist."""
        lc = LineCollection([seg.as_array() for seg in segments],
                            colors=color, linewidths=lw, zorder=zorder)
        ax.add_collection(lc)
        return lc

    @staticmethod
    def update_segments(lc: LineCollection, segments):
        lc.set_segments([seg.as_array() for seg in segments])

    # -------- Endpoints (labelled circles) --------
    @staticmethod
    def make_point_patch(ax, point, radius=20.0, fc='w', ec='k', lw=1.0, zorder=3, fontsize=9):
        """White disc with the point's label centered on it. Returns (circle, text)."""
        circ = Circle((point.x, point.y), radius, fc=fc, ec=ec, lw=lw, zorder=zorder)
        ax.add_patch(circ)
        txt = ax.text(point.x, point.y, point.label or "", ha='center', va='center',
                      fontsize=fontsize, zorder=zorder + 1)
        return circ, txt

    @staticmethod
    def update_point_patch(patch, point):
        circ, txt = patch
        circ.center = (point.x, point.y)
        txt.set_position((point.x, point.y))
        txt.set_text(point.label or "")

    # -------- Intersection markers --------
    @staticmethod
    def ensure_markers(ax, count, existing=None, radius=6.0, color='r', zorder=5):
        """
        Make sure we have exactly 'count' visible marker artists (circle, text) on 'ax'.
        Extras are hidden, not removed, so they can be reused next frame.
        Returns the whole pool; the first 'count' markers are the visible ones.
        """
        ms = [] if existing is None else list(existing)
        while len(ms) < count:
            circ = Circle((np.nan, np.nan), radius, fc=color, ec='k', lw=0.8, zorder=zorder)
            ax.add_patch(circ)
            txt = ax.text(np.nan, np.nan, "", color=color, fontsize=8,
                          ha='left', va='bottom', zorder=zorder + 1)
            ms.append((circ, txt))
        for j, (circ, txt) in enumerate(ms):
            visible = j < count
            circ.set_visible(visible)
            txt.set_visible(visible)
        return ms

    @staticmethod
    def update_marker(marker, point, text="", offset=8.0):
        circ, txt = marker
        circ.center = (point.x, point.y)
        txt.set_position((point.x + offset, point.y - offset))
        txt.set_text(text)
