# at module top
ANIM = None
import time

import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation

from intersect2d.control.mouse_segment import MouseSegment
from intersect2d.engine.scene import Scene
from intersect2d.engine.debug_checks import check_intersection
from intersect2d.geometry.draw_utils import DrawUtils
from intersect2d.geometry.env_builder import build_segments


# ----------------------------- params --------------------------------
FIG_SIZE          = (8, 6)             # inches; canvas units are pixels
FRAME_INTERVAL_MS = 1000 / 60          # ~60 fps
TIME_SCALE        = 0.001              # rad of mouse-segment rotation per ms
MOUSE_RADIUS      = 50.0               # half-length of the mouse segment
POINT_RADIUS      = 20.0               # endpoint discs
MARKER_RADIUS     = 6.0                # intersection discs
DEBUG_CHECKS      = False              # print an [ix] line per intersection each frame

# -------------------------- helpers ----------------------------------


def canvas_size(fig):
    """Figure size in pixels (width, height)."""
    w, h = fig.get_size_inches() * fig.dpi
    return float(w), float(h)


def fit_canvas(ax, width, height):
    # browser-canvas convention: origin top-left, y grows downward
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)


# -------------------------- main animation ---------------------------


def build_demo(segments=None, clock=time.perf_counter):
    """
    Builds the figure, the scene and the per-frame callback.
    clock: seconds, monotonic; the rotation follows elapsed clock time, not frame count.
    Returns (fig, scene, stepAndDraw); nothing is animated yet.
    """

    fig = plt.figure(figsize=FIG_SIZE)
    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_axis_off()
    width, height = canvas_size(fig)
    fit_canvas(ax, width, height)

    if segments is None:
        segments = build_segments(width, height)

    mouse = MouseSegment(radius=MOUSE_RADIUS)
    scene = Scene(segments=segments, mouse=mouse, time_scale=TIME_SCALE)

    lines = DrawUtils.draw_segments(ax, scene.all_segments)
    pointPatches = [DrawUtils.make_point_patch(ax, p, radius=POINT_RADIUS)
                    for seg in scene.all_segments for p in seg]
    markers = []

    # Overlay text for quick debugging
    textOverlay = ax.text(0.01, 0.99, "", transform=ax.transAxes, va='top', ha='left', fontsize=9)

    def onMove(event):
        if event.inaxes is not ax or event.xdata is None or event.ydata is None:
            return
        mouse.set_target(event.xdata, event.ydata)

    def onResize(_event):
        fit_canvas(ax, *canvas_size(fig))

    fig.canvas.mpl_connect('motion_notify_event', onMove)
    fig.canvas.mpl_connect('resize_event', onResize)

    t0 = clock()

    def stepAndDraw(_frameIdx):
        # 1) move the mouse segment, collect intersections
        hits = scene.step((clock() - t0) * 1000.0)
        allSegments = scene.all_segments

        # 2) segments and endpoints
        DrawUtils.update_segments(lines, allSegments)
        for patch, p in zip(pointPatches, [p for seg in allSegments for p in seg]):
            DrawUtils.update_point_patch(patch, p)

        # 3) intersection markers (reuse, hide extras)
        markers[:] = DrawUtils.ensure_markers(ax, len(hits), existing=markers, radius=MARKER_RADIUS)
        for marker, (i, j, p) in zip(markers, hits):
            DrawUtils.update_marker(marker, p, text=f"{i}x{j}")
            if DEBUG_CHECKS:
                check_intersection(allSegments[i], allSegments[j], p)

        # 4) overlay quick stats
        tx, ty = mouse.target
        textOverlay.set_text(f"mouse@({tx:.0f},{ty:.0f})  intersections: {len(hits)}")

        artists = [lines, textOverlay]
        for circ, txt in pointPatches:
            artists.extend([circ, txt])
        for circ, txt in markers:
            artists.extend([circ, txt])
        return artists

    return fig, scene, stepAndDraw


def run_animation(segments=None, show=True):
    fig, _scene, stepAndDraw = build_demo(segments)

    global ANIM
    ANIM = FuncAnimation(fig, stepAndDraw, frames=None, interval=FRAME_INTERVAL_MS,
                         blit=False, cache_frame_data=False)
    if show:
        plt.show()
    return ANIM




if __name__ == "__main__":
    run_animation()
