# ============================================================
# ========================= MAIN =============================
# ============================================================

import argparse
import logging
import random
import sys

import pygame

from sortrace import algorithms
from sortrace.custom import autoload_custom_sorters, custom_paths, load_custom_sorter
from sortrace.scheduler import Scheduler
from sortrace.settings import AUTOLOAD_JSON, FPS, read_settings, save_settings
from sortrace.ticker import ClockTicker
from sortrace.view import RaceView, build_fonts, open_window

log = logging.getLogger(__name__)


def parse_args(argv=None, settings=None):
    settings = settings or {}
    p = argparse.ArgumentParser(prog='sortrace',
                                description='Step-by-step race between sorting algorithms',
                                formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    p.add_argument("--size", default=settings.get("size"), help="number of elements (1-999)")
    p.add_argument("--interval", default=settings.get("interval_ms"),
                   help="milliseconds between two steps (1-9999)")
    p.add_argument("--seed", default=None, type=int, help="random seed for shuffle and pivots")
    p.add_argument("--sorter", dest="sorters", action="append", default=[],
                   metavar="PATH", help="extra custom sorter .py file (repeatable)")
    p.add_argument("--settings", default=AUTOLOAD_JSON, metavar="PATH",
                   help="JSON file remembering size, interval and custom sorters")
    p.add_argument("--autorun", action="store_true", help="start running immediately")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p.parse_args(argv)


def build_algorithms(rng, autoload_paths=(), sorter_paths=()):
    """
    Built-ins first, then every custom sorter that loaded.
    Remembered paths (autoload_paths) that vanished are skipped quietly;
    paths asked for on the command line (sorter_paths) warn on failure.
    """
    keys = [k for _, k in algorithms.ALGORITHMS]
    loaded = autoload_custom_sorters(autoload_paths)
    for path in sorter_paths:
        result, err = load_custom_sorter(path)
        if err:
            log.warning("Could not load sorter %s: %s", path, err)
        else:
            loaded.append(result)
    for _, key in loaded:
        if key not in keys: keys.append(key)
    return Scheduler.builtin_algorithms(rng, keys)


def main(argv=None):
    # --settings decides where the defaults of the other options come from
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--settings", default=AUTOLOAD_JSON)
    known, _ = pre.parse_known_args(argv)
    settings = read_settings(known.settings)
    args = parse_args(argv, settings)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    rng = random.Random(args.seed)
    algos = build_algorithms(rng, settings["custom_sorters"], args.sorters)

    pygame.init()
    screen = open_window()
    fonts  = build_fonts()
    clock  = pygame.time.Clock()
    ticker = ClockTicker()

    sched = Scheduler(algos, size=args.size, interval_ms=args.interval,
                      ticker=ticker, rng=rng)
    view  = RaceView(screen, fonts, sched.size, sched.interval_ms)
    if args.autorun:
        sched.start()

    try:
        while True:
            clock.tick(FPS)
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT:
                    return 0
                if ev.type == pygame.KEYDOWN and ev.key == pygame.K_ESCAPE:
                    return 0
                cmd = view.handle(ev)
                if ev.type == pygame.KEYDOWN and ev.key == pygame.K_SPACE:
                    cmd = "stop" if sched.running else "run"
                if cmd == "run":
                    sched.start(view.interval_ms)
                elif cmd == "stop":
                    sched.stop()
                elif cmd == "reset":
                    sched.reset(view.size)
            ticker.poll()
            view.draw(sched.snapshot())
    finally:
        sched.stop()
        save_settings(dict(size=sched.size, interval_ms=sched.interval_ms,
                           custom_sorters=custom_paths()), args.settings)
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())
