import json

import pytest

from hexapawn.core import ActionKind, IllegalActionError, Location, PlayerAction, encode_action
from scripts.play_scripted import (
    BUILTIN_SCRIPTS,
    DEFAULT_SCRIPT,
    load_script,
    replay_logged_game,
    run_script,
    save_log,
    summarize,
)


def test_default_script_reproduces_sample_game():
    state, records = run_script(DEFAULT_SCRIPT, verbose=False)
    assert state.board.tolist() == [[0, 1, 1], [0, 0, -1], [-1, 1, 0]]
    assert [record["kind"] for record in records] == ["Advance", "Advance", "CaptureRight"]
    assert [record["player"] for record in records] == ["Max", "Min", "Max"]


def test_script_stops_when_no_listed_action_is_legal():
    moves = [
        {"kind": "advance", "src": [0, 1]},
        {"kind": ["capture_left", "capture_right"], "src": [2, 1]},
        {"kind": "advance", "src": [0, 0]},
    ]
    state, records = run_script(moves, verbose=False)
    assert len(records) == 1
    assert state.board.tolist() == [[1, 0, 1], [0, 1, 0], [-1, -1, -1]]


def test_yaml_script_loading(tmp_path):
    path = tmp_path / "script.yaml"
    path.write_text("moves:\n  - kind: advance\n    src: [0, 2]\n  - kind: capture_right\n    src: [2, 1]\n")
    moves = load_script(path)
    state, records = run_script(moves, verbose=False)
    assert len(records) == 2
    assert state.board.tolist() == [[1, 1, 0], [0, 0, -1], [-1, 0, -1]]


def test_replay_logged_game(tmp_path, capsys):
    _, records = run_script(DEFAULT_SCRIPT, verbose=False)
    log_path = tmp_path / "logs" / "game.json"
    save_log({"metadata": {}, "moves": records}, log_path)
    assert json.loads(log_path.read_text())["moves"] == records

    summary = replay_logged_game(log_path, verbose=False)
    assert summary["moves"] == 3
    assert summary["terminal"] is True
    assert summary["winner"] == "Max"
    assert summary["vector"] == [-1, 0, 1, 1, 0, 0, -1, -1, 1, 0]


def test_capture_line_script_ends_with_max_on_row_two():
    state, records = run_script(BUILTIN_SCRIPTS["capture-line"], verbose=False)
    assert len(records) == 5
    assert records[1]["kind"] == "CaptureLeft"
    assert state.board.tolist() == [[0, 0, 1], [-1, 0, -1], [-1, 1, 0]]
    assert summarize(state, len(records))["vector"] == [-1, 0, 0, 1, -1, 0, -1, -1, 1, 0]


def test_replay_rejects_moves_after_game_end(tmp_path):
    _, records = run_script(DEFAULT_SCRIPT, verbose=False)
    late_capture = PlayerAction(ActionKind.CAPTURE_LEFT, Location(1, 2))
    records.append(
        {
            "move_index": 3,
            "player": "Min",
            "kind": late_capture.kind.value,
            "src": [1, 2],
            "action_index": encode_action(late_capture),
        }
    )
    log_path = tmp_path / "overrun.json"
    log_path.write_text(json.dumps({"metadata": {}, "moves": records}))
    with pytest.raises(IllegalActionError):
        replay_logged_game(log_path, verbose=False)
