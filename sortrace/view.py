# ============================================================
# ======================= COLOR / DRAW =======================
# ============================================================
#
# One horizontal band per algorithm.  Each column of a band shows one
# array element as a grey level (0 = black, size-1 = near white), so a
# sorted band is a smooth left-to-right gradient.

import math

import numpy as np
import pygame

from sortrace.settings import (WINDOW_WIDTH, WINDOW_HEIGHT, PANEL_HEIGHT,
                               SLIDER_MAX_ELEMENTS, SLIDER_MAX_INTERVAL,
                               UI_BG, UI_PANEL, UI_PANEL2, UI_ACCENT, UI_TEXT,
                               UI_SUBTEXT, UI_BORDER, UI_GREEN,
                               UI_RED, LABEL_BG)

LABEL_W = 150
LABEL_H = 25


def shade_pixels(arrays, size, width, height):
    """
    Build a (width, height, 3) uint8 image (pygame.surfarray layout) with
    one band per array.  Column x shows element x*size//width.
    """
    px = np.zeros((width, height, 3), dtype=np.uint8)
    if not arrays or size <= 0:
        return px
    band = height // len(arrays)
    cols = np.arange(width) * size // width
    for n, arr in enumerate(arrays):
        grey = (np.asarray(arr, dtype=np.int64)[cols] * 255 // size).astype(np.uint8)
        px[:, n*band:(n+1)*band, :] = grey[:, None, None]
    return px


def build_fonts():
    # SysFont takes a list of names and falls back to the default font
    def tf(names, sz):
        return pygame.font.SysFont(names, sz)
    mono = ["Consolas", "Courier New", "Lucida Console"]
    sans = ["Segoe UI", "Tahoma", "Arial"]
    return dict(label=tf(sans, 20),
                small=tf(sans, 13), mono=tf(mono, 16))

# ============================================================
# ========================= UI WIDGETS =======================
# ============================================================

class Slider:
    """Single-knob integer slider."""
    KNOB_RADIUS = 6

    def __init__(self, x, y, w, lo, hi, val, label, unit=""):
        self.x, self.y, self.w = x, y, w
        self.lo, self.hi = lo, hi
        self.value = val
        self.label = label
        self.unit = unit
        self.drag = False
        self.track = pygame.Rect(x, y+18, w, 4)
        self.hit = pygame.Rect(x-5, y, w+10, 38)

    def _r(self):
        return (min(max(self.value, self.lo), self.hi) - self.lo) / (self.hi - self.lo)

    def _kx(self):
        return int(self.x + self._r() * self.w)

    def handle(self, ev):
        if ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if math.hypot(ev.pos[0]-self._kx(), ev.pos[1]-self.track.centery) < 14 \
               or self.hit.collidepoint(ev.pos):
                self.drag = True; self._set(ev.pos[0])
        elif ev.type == pygame.MOUSEBUTTONUP:
            self.drag = False
        elif ev.type == pygame.MOUSEMOTION and self.drag:
            self._set(ev.pos[0])

    def _set(self, mx):
        r = max(0.0, min(1.0, (mx - self.x) / self.w))
        self.value = int(round(self.lo + r * (self.hi - self.lo)))

    def draw(self, s, fonts):
        s.blit(fonts['small'].render(f"{self.label}:  {self.value}{self.unit}", True, UI_SUBTEXT),
               (self.x, self.y))
        pygame.draw.rect(s, UI_BORDER, self.track, border_radius=2)
        fw = int(self._r() * self.w)
        if fw > 0: pygame.draw.rect(s, UI_ACCENT, (self.x, self.track.y, fw, 4), border_radius=2)
        kx, ky = self._kx(), self.track.centery
        pygame.draw.circle(s, UI_PANEL2, (kx, ky), self.KNOB_RADIUS)
        pygame.draw.circle(s, UI_ACCENT, (kx, ky), self.KNOB_RADIUS, 2)
        pygame.draw.circle(s, UI_ACCENT, (kx, ky), 2)


class SmBtn:
    def __init__(self, x, y, w, h, lbl, cmd):
        self.rect = pygame.Rect(x, y, w, h); self.label = lbl; self.cmd = cmd
        self.enabled = True

    def draw(self, s, fonts, hov=False):
        if not self.enabled: bg, fc = UI_PANEL, UI_SUBTEXT
        elif hov:            bg, fc = UI_ACCENT, (0, 0, 0)
        else:                bg, fc = UI_PANEL2, UI_TEXT
        pygame.draw.rect(s, bg,        self.rect, border_radius=5)
        pygame.draw.rect(s, UI_BORDER, self.rect, 1, border_radius=5)
        t = fonts['small'].render(self.label, True, fc)
        s.blit(t, t.get_rect(center=self.rect.center))

# ============================================================
# ========================= RACE VIEW ========================
# ============================================================

class RaceView:
    """
    Presentation adapter: bands + labels + step counter on top, control
    panel (Run / Stop / Reset, size and interval sliders) at the bottom.
    """

    def __init__(self, screen, fonts, size, interval_ms):
        self.screen = screen
        self.fonts  = fonts
        self.width  = screen.get_width()
        self.height = screen.get_height() - PANEL_HEIGHT

        py = self.height + 16
        self.buttons = [
            SmBtn(16,  py, 90, 32, "Run",   "run"),
            SmBtn(114, py, 90, 32, "Stop",  "stop"),
            SmBtn(212, py, 90, 32, "Reset", "reset"),
        ]
        self.sl_size = Slider(340, py - 6, 300, 1, SLIDER_MAX_ELEMENTS, size, "Elements")
        self.sl_interval = Slider(680, py - 6, 300, 1, SLIDER_MAX_INTERVAL, interval_ms,
                                  "Interval", " ms")

    @property
    def size(self):
        return self.sl_size.value

    @property
    def interval_ms(self):
        return self.sl_interval.value

    def handle(self, ev):
        """Returns "run", "stop", "reset" or None."""
        self.sl_size.handle(ev)
        self.sl_interval.handle(ev)
        if ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            for b in self.buttons:
                if b.enabled and b.rect.collidepoint(ev.pos):
                    return b.cmd
        if ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_r: return "reset"
        return None

    def draw(self, snap):
        s = self.screen
        s.fill(UI_BG)

        rows = [inst["array"] for inst in snap["instances"]]
        px = shade_pixels(rows, snap["size"], self.width, self.height)
        s.blit(pygame.surfarray.make_surface(px), (0, 0))

        band = self.height // max(1, len(rows))
        for n, inst in enumerate(snap["instances"]):
            y = (n+1) * band - LABEL_H
            pygame.draw.rect(s, LABEL_BG, (0, y, LABEL_W, LABEL_H))
            col = UI_GREEN if inst["finished"] else UI_RED
            s.blit(self.fonts['label'].render(inst["name"], True, col), (5, y + 2))

        self._draw_panel(snap)
        pygame.display.flip()

    def _draw_panel(self, snap):
        s  = self.screen
        mp = pygame.mouse.get_pos()
        panel = pygame.Rect(0, self.height, self.width, PANEL_HEIGHT)
        pygame.draw.rect(s, UI_PANEL, panel)
        pygame.draw.line(s, UI_BORDER, (0, self.height), (self.width, self.height), 1)

        self.buttons[0].enabled = not snap["running"]
        self.buttons[1].enabled = snap["running"]
        for b in self.buttons:
            b.draw(s, self.fonts, b.enabled and b.rect.collidepoint(mp))
        self.sl_size.draw(s, self.fonts)
        self.sl_interval.draw(s, self.fonts)

        steps = self.fonts['mono'].render(f"Steps: {snap['step']}", True, UI_TEXT)
        s.blit(steps, (16, self.height + 58))
        hint = self.fonts['small'].render("SPACE run/stop   R reset   ESC quit", True, UI_SUBTEXT)
        s.blit(hint, (self.width - hint.get_width() - 16, self.height + 62))


def open_window(title="SortRace"):
    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT + PANEL_HEIGHT))
    pygame.display.set_caption(title)
    return screen
