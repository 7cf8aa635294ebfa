"""Entry-point for demo runs."""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import Any, List, Optional

import yaml
from dotenv import load_dotenv

from gridpath.pathfinder import GridPathfinder, GridPathfinderConfig
from gridpath.utils.maps import ascii_grid_map
from gridpath.viewer import run_viewer

LOGGER = logging.getLogger("gridpath")
DEFAULT_CONFIG = Path("configs/default.yaml")


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Breadth-first grid pathfinding demo")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to YAML config (defaults to $GRIDPATH_CONFIG or configs/default.yaml)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Override RNG seed from config",
    )
    parser.add_argument(
        "--probability",
        type=float,
        default=None,
        help="Override obstacle probability (percent)",
    )
    parser.add_argument(
        "--visual",
        action="store_true",
        help="Open a pygame window instead of printing the map",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Python logging level",
    )
    return parser.parse_args(argv)


def load_config(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        cfg = yaml.safe_load(handle) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"config must be a mapping, got {type(cfg).__name__}")
    return cfg


def resolve_config_path(arg: Optional[Path]) -> Path:
    if arg is not None:
        return arg
    env_path = os.environ.get("GRIDPATH_CONFIG")
    return Path(env_path) if env_path else DEFAULT_CONFIG


def _coord(value: Any, name: str) -> tuple[int, int]:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"{name} must be an [x, y] pair, got {value!r}")
    return (int(value[0]), int(value[1]))


def build_pathfinder(cfg: dict[str, Any], args: argparse.Namespace) -> GridPathfinder:
    pf_cfg = cfg.get("pathfinder") or {}
    seed = args.seed if args.seed is not None else cfg.get("seed")
    probability = (
        args.probability
        if args.probability is not None
        else float(pf_cfg.get("obstacle_probability", 25.0))
    )
    obstacle = pf_cfg.get("obstacle_location")
    config = GridPathfinderConfig(
        height=int(pf_cfg.get("height", 5)),
        width=int(pf_cfg.get("width", 5)),
        start=_coord(pf_cfg.get("start", [0, 1]), "start"),
        goal=_coord(pf_cfg.get("goal", [4, 4]), "goal"),
        obstacle_probability=probability,
        obstacle_location=_coord(obstacle, "obstacle_location") if obstacle is not None else None,
        min_size=int(pf_cfg.get("min_size", 4)),
        max_size=int(pf_cfg.get("max_size", 22)),
        seed=int(seed) if seed is not None else None,
    )
    return GridPathfinder(config)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    load_dotenv()
    config_path = resolve_config_path(args.config)
    if not config_path.is_file() and config_path != DEFAULT_CONFIG:
        LOGGER.error("Config file %s not found", config_path)
        return 2

    try:
        cfg = load_config(config_path) if config_path.is_file() else {}
        if not cfg:
            LOGGER.info("No config at %s, using defaults", config_path)
        pathfinder = build_pathfinder(cfg, args)
    except ValueError as exc:
        LOGGER.error("Invalid config %s: %s", config_path, exc)
        return 2
    if pathfinder.config.seed is not None:
        LOGGER.info("Seeding RNG with %s", pathfinder.config.seed)
    pathfinder.initialize()
    if pathfinder.config.obstacle_location is not None:
        pathfinder.on_config_changed()

    if args.visual:
        viewer_cfg = cfg.get("viewer") or {}
        run_viewer(
            pathfinder,
            cell_size=int(viewer_cfg.get("cell_size", 32)),
            fps=int(viewer_cfg.get("fps", 30)),
        )
        return 0

    cfg_pf = pathfinder.config
    print(ascii_grid_map(pathfinder.grid, pathfinder.path, cfg_pf.start, cfg_pf.goal))
    if pathfinder.path:
        print(f"path length: {len(pathfinder.path)}")
        return 0
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
