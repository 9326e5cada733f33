import logging
import operator
import sys

import pygame

from supersorter import engine
from supersorter.trace import TracedList

logger = logging.getLogger(__name__)

# ============================================================
# ===================== USER SETTINGS ========================
# ============================================================

WINDOW_WIDTH   = 1100
WINDOW_HEIGHT  = 680
MAX_ARRAY_SIZE = 128
FPS            = 120

BACKGROUND_COLOR = (5, 5, 10)
ACTIVE_COLOR     = (255, 60, 60)
LABEL_COLOR      = (140, 140, 160)
BAR_SPACING      = 1
SORTED_HOLD_MS   = 1800

# ============================================================
# ======================= COLOR / DRAW =======================
# ============================================================

def value_to_color(value, max_value):
    r = value / max_value if max_value else 0.0
    if r < 0.25: return (0, int(255 * r * 4), 255)
    if r < 0.5:  return (0, 255, int(255 * (1 - (r - 0.25) * 4)))
    if r < 0.75: return (int(255 * (r - 0.5) * 4), 255, 0)
    return (255, int(255 * (1 - (r - 0.75) * 4)), 0)


def render_bars(surface, values, active_indices, label="", font=None):
    """Paint one frame onto `surface`; no display flip."""
    surface.fill(BACKGROUND_COLOR)
    n = len(values)
    if n == 0:
        return
    width, height = surface.get_size()
    max_value = max(max(values), 1)
    bw = width / n
    for i, v in enumerate(values):
        h = (v / max_value) * (height - 60)
        c = ACTIVE_COLOR if i in active_indices else value_to_color(v, max_value)
        pygame.draw.rect(surface, c, (i * bw, height - h, max(bw - BAR_SPACING, 1), h))
    if label and font is not None:
        surface.blit(font.render(label, True, LABEL_COLOR), (12, 10))

# ============================================================
# ========================= RECORDING ========================
# ============================================================

def record_frames(values, algorithm=engine.Algorithm.DEFAULT, comparator=operator.gt):
    """
    Sort a copy of `values` through a TracedList and return
    (frames, sorted_values). Read frames carry no snapshot; the replay
    keeps drawing the last written state for them.
    """
    traced = TracedList(values, record=True)
    engine.sort(traced, comparator, algorithm)
    logger.debug("Recorded %d frames (%d reads, %d writes) for %s",
                 len(traced.frames), traced.reads, traced.writes,
                 engine.Algorithm.parse(algorithm).display_name)
    return traced.frames, traced.snapshot()


def iter_states(values, frames):
    """Resolve frames into (state, active) pairs ready to draw."""
    state = list(values)
    for snapshot, active in frames:
        if snapshot is not None:
            state = snapshot
        yield state, active

# ============================================================
# ========================= MAIN LOOP ========================
# ============================================================

def replay(screen, values, frames, label="", speed=1.0):
    """
    Play back recorded frames. Returns False if the window was closed,
    True when playback finished or ESC was pressed.
    """
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("consolas", 18)
    final = list(values)

    for state, active in iter_states(values, frames):
        clock.tick(FPS * speed)
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                return False
            if ev.type == pygame.KEYDOWN and ev.key == pygame.K_ESCAPE:
                return True
        render_bars(screen, state, active, label, font)
        pygame.display.flip()
        final = state

    render_bars(screen, final, [], label + "  [SORTED]", font)
    pygame.display.flip()
    pygame.time.wait(SORTED_HOLD_MS)
    return True


def show(values, algorithm=engine.Algorithm.DEFAULT, speed=1.0, comparator=operator.gt):
    if len(values) > MAX_ARRAY_SIZE:
        logger.warning("Trimming %d values to %d for display", len(values), MAX_ARRAY_SIZE)
        values = values[:MAX_ARRAY_SIZE]

    algorithm = engine.Algorithm.parse(algorithm)
    frames, result = record_frames(values, algorithm, comparator)
    if not engine.is_sorted(result, comparator):
        logger.error("%s produced an unsorted result", algorithm.display_name)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("SuperSorter")
        replay(screen, values, frames, algorithm.display_name, speed)
    finally:
        pygame.quit()
    return result


if __name__ == "__main__":
    import random
    arr = list(range(1, 65)); random.shuffle(arr)
    show(arr, sys.argv[1] if len(sys.argv) > 1 else "default")
