# main.py
import argparse
import logging
from pathlib import Path

import pygame  # type: ignore

from .config import Config, DEVICE_TICK_MS, FPS, THEMES, WINDOW_SIZE
from .controls import Command, SwipeTracker, handle_input
from .loop import FixedStepLoop
from .render import draw_frame
from .session import GameSession
from .storage import FileHighScoreStore

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Grid snake arcade game")
    parser.add_argument("--grid", type=int, default=20, help="cells per side")
    parser.add_argument(
        "--device",
        type=str,
        default="desktop",
        choices=sorted(DEVICE_TICK_MS),
        help="device class, picks the base tick interval",
    )
    parser.add_argument("--mystery", action="store_true", help="start with mystery mode on")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--theme", type=str, default="dark", choices=sorted(THEMES))
    parser.add_argument(
        "--highscore-file",
        type=Path,
        default=None,
        help="where the best score is kept (default ~/.snake_arcade/highscore)",
    )
    parser.add_argument("--log-level", type=str, default="WARNING")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        cfg = Config(seed=args.seed, grid_size=args.grid, device=args.device, mystery=args.mystery)
    except ValueError as exc:
        parser.error(str(exc))
    session = GameSession(cfg, FileHighScoreStore(args.highscore_file))
    loop = FixedStepLoop(session)
    logger.info("grid=%d device=%s best=%d", cfg.grid_size, cfg.device, session.high_score)

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode((WINDOW_SIZE, WINDOW_SIZE), pygame.RESIZABLE)
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()
    swipe = SwipeTracker()
    theme = args.theme

    def on_frame() -> bool:
        nonlocal theme
        # 1) input
        cmd = handle_input(session, pygame.event.get(), swipe, screen.get_size())
        if cmd is Command.QUIT:
            return False
        if cmd is Command.TOGGLE_THEME:
            theme = "light" if theme == "dark" else "dark"

        # 2) render; ticks already ran for this frame
        draw_frame(screen, font, session.snapshot(), THEMES[theme])
        pygame.display.flip()
        clock.tick(FPS)
        return True

    try:
        loop.run(pygame.time.get_ticks, on_frame)
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
