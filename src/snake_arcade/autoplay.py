# autoplay.py
"""
Headless autopilot runs, handy for tuning speed and placement constants.

    snake-arcade-sim --episodes 20 --policy greedy --mystery
"""
from __future__ import annotations
import argparse
import csv
import logging
import os
from typing import Callable, List, Tuple

import numpy as np  # type: ignore

from .config import Config, UP, DOWN, LEFT, RIGHT
from .engine import is_opposite
from .loop import FixedStepLoop
from .session import GameSession
from .state import Coord, Session, Snapshot
from .storage import MemoryHighScoreStore

logger = logging.getLogger(__name__)

DIRECTIONS = (UP, DOWN, LEFT, RIGHT)
FRAME_MS = 1000 / 60

Policy = Callable[[Snapshot, Coord, np.random.Generator], Coord]


def would_hit(snap: Snapshot, direction: Coord) -> bool:
    """True if moving the head one cell in `direction` is fatal."""
    hx, hy = snap.snake[0]
    nx, ny = hx + direction[0], hy + direction[1]
    if not (0 <= nx < snap.grid_size and 0 <= ny < snap.grid_size):
        return True
    return (nx, ny) in snap.snake[:-1]


def best_moves_toward(hx: int, hy: int, tx: int, ty: int) -> List[Coord]:
    """
    Moves ordered by how much they reduce Manhattan distance to the target.
    Does NOT check collisions; caller should filter unsafe moves.
    """
    prefs = []
    if tx < hx:
        prefs.append(LEFT)
    elif tx > hx:
        prefs.append(RIGHT)
    if ty < hy:
        prefs.append(UP)
    elif ty > hy:
        prefs.append(DOWN)
    for d in DIRECTIONS:
        if d not in prefs:
            prefs.append(d)
    return prefs


def policy_random(snap: Snapshot, heading: Coord, rng: np.random.Generator) -> Coord:
    return DIRECTIONS[int(rng.integers(len(DIRECTIONS)))]


def policy_greedy(snap: Snapshot, heading: Coord, rng: np.random.Generator) -> Coord:
    """
    Head for the mystery item when there is one, otherwise the food:
    - prefer moves that reduce Manhattan distance
    - skip reversals and moves into a wall or the body
    - boxed in: keep going and accept fate
    """
    hx, hy = snap.snake[0]
    target = snap.special[0] if snap.special is not None else snap.food
    tx, ty = target if target is not None else (hx, hy)

    for d in best_moves_toward(hx, hy, tx, ty):
        if is_opposite(d, heading):
            continue
        if not would_hit(snap, d):
            return d
    return heading


POLICIES = {
    "random": policy_random,
    "greedy": policy_greedy,
}


def run_episode(session: GameSession, policy: Policy, max_ticks: int = 10_000) -> Tuple[int, int, int]:
    """
    Play one session to game over (or `max_ticks`) on a synthetic clock.

    Returns:
        ticks: number of engine ticks run
        score: final score
        length: final snake length
    """
    # close out a game left running by an earlier capped episode
    if session.mode is Session.PAUSED:
        session.resume()
    if session.mode is Session.PLAYING:
        session.end()

    loop = FixedStepLoop(session)
    session.start()
    assert session.state is not None

    now = 0.0
    ticks = 0
    loop.frame(now)
    while session.mode is Session.PLAYING and ticks < max_ticks:
        # steer once per frame, like a player would
        heading = session.state.direction
        session.set_direction(policy(session.snapshot(), heading, session.rng))
        now += FRAME_MS
        ticks += loop.frame(now)

    logger.debug("episode done: ticks=%d score=%d", ticks, session.state.score)
    return ticks, session.state.score, len(session.state.snake)


# --------------------------
# Main
# --------------------------
def main(argv=None):
    parser = argparse.ArgumentParser(description="Run headless autopilot games")
    parser.add_argument("--episodes", type=int, default=10)
    parser.add_argument("--policy", type=str, default="greedy", choices=sorted(POLICIES))
    parser.add_argument("--mystery", action="store_true")
    parser.add_argument("--grid", type=int, default=20)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--max-ticks", type=int, default=10_000)
    parser.add_argument(
        "--outdir",
        type=str,
        default="data/runs",
        help="CSV will be saved here",
    )
    parser.add_argument("--log-level", type=str, default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper())

    try:
        cfg = Config(seed=args.seed, grid_size=args.grid, mystery=args.mystery)
    except ValueError as exc:
        parser.error(str(exc))
    session = GameSession(cfg, MemoryHighScoreStore())
    policy = POLICIES[args.policy]

    os.makedirs(args.outdir, exist_ok=True)
    out_csv = os.path.join(args.outdir, f"autoplay_{args.policy}.csv")

    print(f"Running {args.episodes} episode(s) with policy={args.policy} mystery={args.mystery}")
    print("ep,ticks,score,length")

    rows = [("ep", "ticks", "score", "length")]
    for ep in range(1, args.episodes + 1):
        ticks, score, length = run_episode(session, policy, args.max_ticks)
        print(f"{ep},{ticks},{score},{length}")
        rows.append((ep, ticks, score, length))

    with open(out_csv, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerows(rows)

    best = max((row[2] for row in rows[1:]), default=0)
    print(f"\nBest score: {best}")
    print(f"Saved results → {out_csv}")


if __name__ == "__main__":
    main()
