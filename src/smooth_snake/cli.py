"""Command-line entry point: headless runs, config export, hosting."""

from __future__ import annotations

import argparse
import json
import logging
import sys

import numpy as np

logger = logging.getLogger(__name__)

_MOVES = ("up", "down", "left", "right")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smooth-snake",
        description="Smooth Snake game engine tools.",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Run a headless game by tick count.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    sim_p.add_argument("--ticks", type=int, default=200)
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument("--rows", type=int, default=None)
    sim_p.add_argument("--cols", type=int, default=None)
    sim_p.add_argument(
        "--policy", type=str, default="straight",
        choices=["straight", "random"],
        help="How input is generated each tick.",
    )

    # --- config ---
    cfg_p = sub.add_parser("config", help="Print or write the default config.")
    cfg_p.add_argument("--output", type=str, default=None)

    # --- serve ---
    serve_p = sub.add_parser("serve", help="Host games over HTTP/WebSocket.")
    serve_p.add_argument("--config", type=str, default=None)
    serve_p.add_argument("--host", default="127.0.0.1")
    serve_p.add_argument("--port", type=int, default=8000)
    serve_p.add_argument("--log-level", default="info")

    # --- play ---
    play_p = sub.add_parser("play", help="Play in a local pygame window.")
    play_p.add_argument("--config", type=str, default=None)

    return parser


def _load_config(path: str | None):
    """Load *path* or the defaults; returns None after logging a bad config."""
    from smooth_snake.config import GameConfig

    try:
        return GameConfig.load(path) if path else GameConfig()
    except (OSError, ValueError) as exc:
        logger.error("Invalid configuration: %s", exc)
        return None


def _run_simulate(args: argparse.Namespace) -> int:
    from smooth_snake.controls import parse_event
    from smooth_snake.engine import GameState
    from smooth_snake.session import GameSession

    config = _load_config(args.config)
    if config is None:
        return 2
    try:
        config = config.with_overrides(
            seed=args.seed, rows=args.rows, cols=args.cols,
        )
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    session = GameSession(config, now_ms=0.0)
    rng = np.random.default_rng(args.seed)
    for _ in range(args.ticks):
        if session.engine.state != GameState.RUNNING:
            break
        if args.policy == "random":
            event = parse_event(_MOVES[int(rng.integers(len(_MOVES)))])
            session.handle(event, 0.0)
        session.run_ticks(1)

    snap = session.snapshot()
    summary = {
        "ticks": snap.tick,
        "score": snap.score,
        "high_score": snap.high_score,
        "state": snap.state.value,
        "reason": snap.reason.value if snap.reason is not None else None,
        "length": len(snap.snake),
    }
    print(json.dumps(summary))  # noqa: T201
    return 0


def _run_config(args: argparse.Namespace) -> int:
    from smooth_snake.config import GameConfig

    config = GameConfig()
    if args.output:
        config.save(args.output)
    else:
        print(json.dumps(config.to_dict(), indent=2))  # noqa: T201
    return 0


def _run_serve(args: argparse.Namespace) -> int:
    import uvicorn

    from smooth_snake.server.app import create_app

    config = _load_config(args.config)
    if config is None:
        return 2
    app = create_app(config)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level)
    return 0


def _run_play(args: argparse.Namespace) -> int:
    try:
        from smooth_snake import frontend
    except ImportError:
        logger.error("pygame is not installed; install the 'play' extra.")
        return 2

    config = _load_config(args.config)
    if config is None:
        return 2
    frontend.run(config)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``smooth-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "config": _run_config,
        "serve": _run_serve,
        "play": _run_play,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
