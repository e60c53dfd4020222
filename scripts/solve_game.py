#!/usr/bin/env python3
"""Solve hare and hounds from the starting position and report the winner."""

import argparse
import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from harehounds.core import BoardState, Move, Position, apply_move, initialize_game_state
from harehounds.evaluation import format_report, summarize
from harehounds.solver import GameSolver, SolverConfig
from harehounds.validation import validate_memo, validate_position_graph, validate_state

SOLVER_KEYS = {"ply_cap", "log_interval"}
DRIVER_KEYS = {"format", "show_line", "log_level"}
SYMBOLS = {"pursuer": "P", "evader": "E", "empty": "."}


def load_config(path_str: Optional[str]) -> Dict:
    if not path_str:
        return {}
    path = Path(path_str)
    if not path.exists():
        return {}
    cfg = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    unknown = set(cfg) - SOLVER_KEYS - DRIVER_KEYS
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")
    return cfg


def format_board(state: BoardState) -> str:
    grid = [[" "] * 5 for _ in range(3)]
    for position in Position:
        if position in state.pursuers:
            symbol = SYMBOLS["pursuer"]
        elif position == state.evader:
            symbol = SYMBOLS["evader"]
        else:
            symbol = SYMBOLS["empty"]
        grid[position.row][position.rank] = symbol
    rows = ["".join(row) for row in grid]
    return "\n".join(rows)


def format_line(state: BoardState, line: List[Move]) -> str:
    blocks = [format_board(state)]
    for move in line:
        mover = state.to_move.value
        state = apply_move(state, move)
        blocks.append(f"{state.ply - 1}. {mover}: {move.origin.name} -> {move.destination.name}")
        blocks.append(format_board(state))
    return "\n".join(blocks)


def main() -> None:
    parser = argparse.ArgumentParser(description="Solve hare and hounds by exhaustive search.")
    parser.add_argument("--config", type=str, default="configs/solver.yaml")
    parser.add_argument("--format", choices=["text", "json"])
    parser.add_argument("--show-line", action="store_true", default=None)
    parser.add_argument("--log-level")
    args = parser.parse_args()

    cfg = load_config(args.config)
    output_format = args.format if args.format is not None else cfg.get("format", "text")
    show_line = args.show_line if args.show_line is not None else cfg.get("show_line", False)
    log_level = args.log_level if args.log_level is not None else cfg.get("log_level", "WARNING")
    logging.basicConfig(level=log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    solver_cfg = {key: cfg[key] for key in SOLVER_KEYS if key in cfg}
    solver = GameSolver(SolverConfig(**solver_cfg))

    validate_position_graph()
    state = initialize_game_state()
    validate_state(state)

    result = solver.run(state)
    validate_memo(result.context)
    report = summarize(result.winner, result.context)

    line = solver.principal_line(state, result.context) if show_line else None

    if output_format == "json":
        output = report.as_dict()
        if line is not None:
            output["line"] = [[position.name for position in move.as_tuple()] for move in line]
        print(json.dumps(output, indent=2))
    else:
        print(format_report(report))
        if line is not None:
            print(format_line(state, line))


if __name__ == "__main__":
    main()
