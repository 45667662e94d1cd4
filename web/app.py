from __future__ import annotations

from typing import Any, Dict, Optional

from flask import Flask, jsonify, request

from baghchal import Game, Piece
from baghchal.ai import DEFAULT_TIME_LIMIT_S
from baghchal.board import MoveTiger

SIDES = {"tiger": Piece.TIGER, "goat": Piece.GOAT}


def create_app(time_limit_s: Optional[float] = None) -> Flask:
    app = Flask(__name__)
    # BAGHCHAL_TIME_LIMIT=3 in the environment sets app.config["TIME_LIMIT"]
    app.config.from_prefixed_env("BAGHCHAL")
    if time_limit_s is None:
        time_limit_s = app.config.get("TIME_LIMIT", DEFAULT_TIME_LIMIT_S)

    game = Game()
    if not game.set_time_limit(time_limit_s):
        app.logger.warning(
            "Ignoring time limit %r (BAGHCHAL_TIME_LIMIT must be 1-10 seconds), using %s",
            time_limit_s,
            game.time_limit_s,
        )
    # Turn order lives here, not in the game: goats always move first
    state: Dict[str, Any] = {"turn": Piece.GOAT, "ai_side": None}
    app.extensions["baghchal"] = {"game": game, "state": state}

    def snapshot(**extra: Any):
        snap = game.snapshot()
        snap["turn"] = state["turn"].label
        snap["ai_side"] = state["ai_side"].label if state["ai_side"] else None
        snap.update(extra)
        return jsonify(snap)

    def pass_turn() -> None:
        state["turn"] = Piece.TIGER if state["turn"] is Piece.GOAT else Piece.GOAT

    def play_ai_turn() -> Optional[Dict[str, object]]:
        """Let the computer move if it owns the current turn."""
        side = state["turn"]
        if side is not state["ai_side"] or game.is_game_over():
            return None
        moved = game.ai_move_tiger() if side is Piece.TIGER else game.ai_move_goat()
        if not moved:
            # A blocked side forfeits its turn so the other side can play on
            app.logger.info("AI %s has no legal move, passing", side.label)
            pass_turn()
            return None
        pass_turn()
        return game.snapshot()["last_move"]

    @app.get("/api/state")
    def api_state():
        return snapshot()

    @app.post("/api/new")
    def api_new():
        data = request.get_json(silent=True) or {}
        ai_side_name = data.get("ai_side")
        if ai_side_name is not None and ai_side_name not in SIDES:
            return jsonify({"error": f"Unknown side: {ai_side_name}"}), 400
        if "time_limit" in data and not game.set_time_limit(data["time_limit"]):
            return jsonify({"error": "time_limit must be between 1 and 10 seconds"}), 400

        game.reset()
        state["turn"] = Piece.GOAT
        state["ai_side"] = SIDES.get(ai_side_name) if ai_side_name else None

        # If the computer plays the goats it opens the game immediately
        ai_move = play_ai_turn()
        return snapshot(ai_move=ai_move)

    @app.post("/api/move")
    def api_move():
        payload = request.get_json(silent=True) or {}
        source = payload.get("source")
        target = payload.get("target", source)
        if source is None:
            return jsonify({"error": "Missing source"}), 400
        if game.is_game_over():
            return jsonify({"error": "Game is over"}), 400

        side = state["turn"]
        if side is state["ai_side"]:
            return jsonify({"error": f"It is the computer's turn ({side.label})"}), 400
        if side is Piece.TIGER:
            moved = game.move_tiger(source, target)
        elif source == target:
            moved = game.place_goat(source)
        elif game.board.goats_in_hand > 0:
            # Goats may only be placed until the hand is empty
            moved = False
        else:
            moved = game.move_goat(source, target)
        if not moved:
            return jsonify({"error": f"Illegal {side.label} move: {source} -> {target}"}), 400

        app.logger.info("%s moved %s -> %s", side.label, source, target)
        pass_turn()
        ai_move = play_ai_turn()
        return snapshot(ai_move=ai_move)

    @app.post("/api/ai")
    def api_ai():
        if game.is_game_over():
            return jsonify({"error": "Game is over"}), 400
        side = state["turn"]
        moved = game.ai_move_tiger() if side is Piece.TIGER else game.ai_move_goat()
        if not moved:
            return jsonify({"error": f"No legal move for {side.label}"}), 400
        pass_turn()
        return snapshot(ai_move=game.snapshot()["last_move"])

    @app.post("/api/undo")
    def api_undo():
        payload = request.get_json(silent=True) or {}
        try:
            steps = int(payload.get("steps", 1))
        except (TypeError, ValueError):
            return jsonify({"error": "steps must be an integer"}), 400
        undone = 0
        for _ in range(max(0, steps)):
            entry = game.last_move()
            if not game.undo():
                break
            # The side that made the undone move is to play again
            state["turn"] = Piece.TIGER if isinstance(entry, MoveTiger) else Piece.GOAT
            undone += 1
        if undone == 0:
            return jsonify({"error": "Nothing to undo"}), 400
        return snapshot(undone=undone)

    @app.post("/api/select")
    def api_select():
        payload = request.get_json(silent=True) or {}
        position = payload.get("position")
        if position is None:
            game.clear_selection()
        elif not game.select_position(position):
            return jsonify({"error": f"Invalid position: {position}"}), 400
        return snapshot()

    @app.post("/api/time-limit")
    def api_time_limit():
        payload = request.get_json(silent=True) or {}
        if not game.set_time_limit(payload.get("seconds")):
            return jsonify({"error": "seconds must be between 1 and 10"}), 400
        return snapshot()

    return app


if __name__ == "__main__":
    create_app().run(host="127.0.0.1", port=5000, debug=True)
