from __future__ import annotations

import logging
import os
import sys
from typing import Any, Dict, List, Optional, Sequence, Tuple

from flask import Flask, jsonify, request

# Ensure package imports work when executed directly from repo root
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from game import (  # noqa: E402
    Board,
    Coord,
    InvalidArgumentError,
    Symbol,
    Tile,
    check_dimensions,
    commit_match,
    create_board,
    find_hint,
    find_path,
    has_moves,
    is_cleared,
    lay_out,
    reshuffle,
)
from lianliankan_core.config import load_settings  # noqa: E402

logger = logging.getLogger(__name__)

app = Flask(__name__)


# ---------- JSON codecs ----------

def tile_to_json(t: Tile) -> Dict[str, Any]:
    return {
        "id": int(t.id),
        "key": int(t.symbol.key),
        "glyph": t.symbol.glyph,
        "color": t.symbol.color,
        "row": int(t.row),
        "col": int(t.col),
        "matched": bool(t.matched),
    }


def board_to_json(b: Board) -> Dict[str, Any]:
    return {"rows": int(b.rows), "cols": int(b.cols), "tiles": [tile_to_json(t) for t in b.tiles]}


def board_from_json(obj: Dict[str, Any]) -> Board:
    """Rebuilds a Board; tiles with row/col are placed by position, otherwise taken row-major."""
    if not isinstance(obj, dict):
        raise InvalidArgumentError("board must be an object")
    rows = int(obj["rows"])
    cols = int(obj["cols"])
    check_dimensions(rows, cols)
    items = obj["tiles"]
    if not isinstance(items, list) or len(items) != rows * cols:
        raise InvalidArgumentError(f"board needs {rows * cols} tiles")
    if not all(isinstance(it, dict) for it in items):
        raise InvalidArgumentError("tiles must be objects")
    placed = ["row" in it and "col" in it for it in items]
    if any(placed) and not all(placed):
        raise InvalidArgumentError("either every tile carries row/col or none does")
    if all(placed):
        items = sorted(items, key=lambda it: (int(it["row"]), int(it["col"])))
        seen = [(int(it["row"]), int(it["col"])) for it in items]
        if seen != [(r, c) for r in range(rows) for c in range(cols)]:
            raise InvalidArgumentError("tile positions must cover the grid exactly once")
    tiles: List[Tile] = []
    for it in items:
        symbol = Symbol(key=int(it["key"]), glyph=str(it.get("glyph", "?")), color=str(it.get("color", "")))
        tiles.append(Tile(id=int(it["id"]), symbol=symbol, matched=bool(it.get("matched", False))))
    return lay_out(rows, cols, tiles)


def tile_ref_from_json(obj: Any, name: str) -> Coord:
    if isinstance(obj, dict):
        return (int(obj["row"]), int(obj["col"]))
    if isinstance(obj, (list, tuple)) and len(obj) == 2:
        return (int(obj[0]), int(obj[1]))
    raise InvalidArgumentError(f"{name} must be {{row, col}} or [row, col]")


def path_to_json(path: Sequence[Coord]) -> List[Dict[str, int]]:
    return [{"row": int(r), "col": int(c)} for (r, c) in path]


def _json_flag(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    raise InvalidArgumentError(f"expected a boolean, got {value!r}")


def _bad_request(e: Exception) -> Any:
    logger.warning("rejected request to %s: %s", request.path, e)
    return jsonify({"ok": False, "error": f"bad request: {e}"}), 400


def _board_and_pair(body: Dict[str, Any]) -> Tuple[Board, Coord, Coord]:
    board = board_from_json(body["board"])
    a = tile_ref_from_json(body.get("a"), "a")
    b = tile_ref_from_json(body.get("b"), "b")
    return board, a, b


# ---------- Game API ----------

@app.post("/api/new")
def api_new() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    settings = load_settings()
    try:
        rows = int(body.get("rows", settings.rows))
        cols = int(body.get("cols", settings.cols))
        seed: Optional[int] = body.get("seed", None)
        strict = _json_flag(body.get("strictPairs"), settings.strict_pairs)
        board = create_board(rows, cols, seed=seed, strict_pairs=strict)
    except (TypeError, ValueError) as e:
        return _bad_request(e)
    return jsonify({"ok": True, "board": board_to_json(board)})


@app.post("/api/path")
def api_path() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        board, a, b = _board_and_pair(body)
        path = find_path(board, a, b)
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(e)
    return jsonify({"ok": True, "path": path_to_json(path), "connectable": bool(path)})


@app.post("/api/match")
def api_match() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        board, a, b = _board_and_pair(body)
        path = commit_match(board, a, b)
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(e)
    return jsonify({
        "ok": True,
        "matched": bool(path),
        "path": path_to_json(path),
        "board": board_to_json(board),
        "cleared": is_cleared(board),
        "hasMoves": has_moves(board),
    })


@app.post("/api/hint")
def api_hint() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        board = board_from_json(body["board"])
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(e)
    hint = find_hint(board)
    if hint is None:
        return jsonify({"ok": True, "hint": None})
    a, b, path = hint
    return jsonify({
        "ok": True,
        "hint": {
            "a": {"row": a.row, "col": a.col},
            "b": {"row": b.row, "col": b.col},
            "path": path_to_json(path),
        },
    })


@app.post("/api/shuffle")
def api_shuffle() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        board = board_from_json(body["board"])
        shuffled = reshuffle(board, seed=body.get("seed", None))
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(e)
    return jsonify({"ok": True, "board": board_to_json(shuffled), "hasMoves": has_moves(shuffled)})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    settings = load_settings()
    app.run(host="0.0.0.0", port=settings.port, debug=settings.debug)
