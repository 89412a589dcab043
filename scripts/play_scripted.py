#!/usr/bin/env python3
"""Play a scripted Hexapawn game in the console, with optional logging & replay."""

import argparse
import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import yaml

from hexapawn.core import (
    ActionKind,
    GameState,
    Location,
    PlayerAction,
    actions,
    apply_action,
    check_action,
    decode_action,
    encode_action,
    is_terminal,
    new_game,
    result,
    winner,
)
from hexapawn.features import to_vector

# Each entry lists the kinds to try in order for the piece at ``src``.
DEFAULT_SCRIPT: List[Dict] = [
    {"kind": ["advance"], "src": [0, 0]},
    {"kind": ["advance"], "src": [2, 2]},
    {"kind": ["capture_left", "capture_right"], "src": [1, 0]},
]

# Min opens with a capture, then Max walks a pawn through to row 2.
CAPTURE_LINE_SCRIPT: List[Dict] = [
    {"kind": ["advance"], "src": [0, 0]},
    {"kind": ["capture_left"], "src": [2, 1]},
    {"kind": ["advance"], "src": [0, 1]},
    {"kind": ["advance"], "src": [2, 2]},
    {"kind": ["advance"], "src": [1, 1]},
]

BUILTIN_SCRIPTS: Dict[str, List[Dict]] = {
    "sample": DEFAULT_SCRIPT,
    "capture-line": CAPTURE_LINE_SCRIPT,
}

_KIND_NAMES = {
    "advance": ActionKind.ADVANCE,
    "capture_left": ActionKind.CAPTURE_LEFT,
    "capture_right": ActionKind.CAPTURE_RIGHT,
}


def load_script(path: Path) -> List[Dict]:
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    moves = data.get("moves")
    if not isinstance(moves, list):
        raise ValueError(f"{path} must define a 'moves' list.")
    return moves


def parse_move(entry: Dict) -> Tuple[List[ActionKind], Location]:
    kinds = entry["kind"]
    if isinstance(kinds, str):
        kinds = [kinds]
    try:
        parsed = [_KIND_NAMES[str(kind).lower()] for kind in kinds]
    except KeyError as exc:
        raise ValueError(f"Unknown action kind {exc.args[0]!r}.") from None
    row, col = entry["src"]
    return parsed, Location(int(row), int(col))


def run_script(moves: Sequence[Dict], *, verbose: bool = True) -> Tuple[GameState, List[Dict]]:
    state = new_game()
    records: List[Dict] = []
    if verbose:
        print(state)

    for entry in moves:
        if is_terminal(state):
            break
        kinds, src = parse_move(entry)
        chosen: Optional[PlayerAction] = None
        for kind in kinds:
            candidate = PlayerAction(kind, src)
            if check_action(state, candidate):
                chosen = candidate
                break
            if verbose:
                print(f"{kind} from {src} failed.\n")
        if chosen is None:
            break

        records.append(
            {
                "move_index": len(records),
                "player": str(state.player),
                "kind": chosen.kind.value,
                "src": list(src.as_tuple()),
                "action_index": encode_action(chosen),
            }
        )
        state = result(state, chosen)
        if verbose:
            print(f"Move {len(records)}:{state}")

    return state, records


def summarize(state: GameState, move_count: int) -> Dict[str, object]:
    victor = winner(state)
    return {
        "moves": move_count,
        "terminal": is_terminal(state),
        "winner": str(victor) if victor is not None else None,
        "board": state.board.tolist(),
        "vector": to_vector(state).tolist(),
    }


def save_log(log: Dict, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(log, indent=2))
    print(f"Saved log to {path}.")


def replay_logged_game(log_path: Path, *, verbose: bool = True) -> Dict[str, object]:
    data = json.loads(log_path.read_text())
    moves = data.get("moves", [])
    state = new_game()
    if verbose:
        print("Replaying logged game.")
        print(state)
    for entry in moves:
        action = decode_action(int(entry["action_index"]))
        state = apply_action(state, action)
        if verbose:
            print(f"{entry.get('player', '?')} played {action}")
            print(state)
    summary = summarize(state, len(moves))
    if verbose:
        print(f"Replay finished. Winner: {summary['winner']}")
    return summary


def main() -> None:
    parser = argparse.ArgumentParser(description="Play a scripted Hexapawn game in the console.")
    parser.add_argument("--script", type=str, help="YAML file with a 'moves' list")
    parser.add_argument("--builtin", choices=sorted(BUILTIN_SCRIPTS), default="sample")
    parser.add_argument("--log-file", type=str)
    parser.add_argument("--replay-log", type=str, help="Replay a logged game and exit")
    parser.add_argument("--replay-quiet", action="store_true")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    if args.replay_log:
        replay_logged_game(Path(args.replay_log), verbose=not args.replay_quiet)
        return

    print("Opening actions:")
    for action in actions(new_game()):
        print(f"  {action}")

    moves = load_script(Path(args.script)) if args.script else BUILTIN_SCRIPTS[args.builtin]
    state, records = run_script(moves)

    if not is_terminal(state):
        print("Legal actions:")
        for action in actions(state):
            print(f"  {action}")
    summary = summarize(state, len(records))
    print(f"Terminal: {summary['terminal']}")
    print(f"Vector: {summary['vector']}")

    if args.log_file:
        save_log({"metadata": {"script": args.script or args.builtin}, "moves": records}, Path(args.log_file))


if __name__ == "__main__":
    main()
