"""Tests for the GameSession dispatcher."""

import json

import pytest

from snake_controller.events import (
    Cell,
    DisplayInd,
    FoodReq,
    FoodResp,
    LooseInd,
    PauseInd,
    ScoreInd,
)
from snake_controller.segments import Direction, Position
from snake_controller.session import GameSession

CONFIG = "W 5 5 F 3 3 S R 2 1 1 2 1"


class TestSessionInit:
    def test_board_painted_from_config(self):
        session = GameSession(CONFIG, seed=0)
        assert session.board.get(1, 1) == Cell.SNAKE
        assert session.board.get(2, 1) == Cell.SNAKE
        assert session.board.get(3, 3) == Cell.FOOD
        assert session.tick_count == 0
        assert not session.lost


class TestSessionTicks:
    def test_tick_updates_board(self):
        session = GameSession(CONFIG, seed=0)
        emitted = session.tick()
        assert emitted == [
            DisplayInd(Position(3, 1), Cell.SNAKE),
            DisplayInd(Position(1, 1), Cell.FREE),
        ]
        assert session.board.get(1, 1) == Cell.FREE
        assert session.board.get(3, 1) == Cell.SNAKE
        assert session.tick_count == 1

    def test_eating_requests_and_places_new_food(self):
        session = GameSession("W 5 5 F 3 3 S R 2 1 3 2 3", seed=0)
        emitted = session.tick()
        assert emitted[:3] == [
            DisplayInd(Position(3, 3), Cell.SNAKE),
            ScoreInd(),
            FoodReq(),
        ]
        # The generated food response is processed after the tick completes.
        assert len(emitted) == 4
        placed = emitted[3]
        assert placed.value == Cell.FOOD
        assert session.controller.food_position == placed.position
        assert session.board.get(*placed.position) == Cell.FOOD
        assert session.scores.score == 1
        assert len(session.controller.body) == 3

    def test_loss_stops_ticks(self):
        session = GameSession("W 3 3 F 0 2 S R 1 2 0", seed=0)
        assert session.tick() == [LooseInd()]
        assert session.lost
        assert session.tick() == []
        assert session.tick_count == 1

    def test_turn(self):
        session = GameSession(CONFIG, seed=0)
        session.turn(Direction.DOWN)
        session.tick()
        assert session.controller.body == ((2, 1), (2, 2))


class TestSessionPause:
    def test_paused_ticks_do_nothing(self):
        session = GameSession(CONFIG, seed=0)
        session.toggle_pause()
        assert session.paused
        assert session.tick() == []
        assert session.tick_count == 0
        session.toggle_pause()
        assert not session.paused


class TestSessionFood:
    def test_relocate_food_moves_food(self):
        session = GameSession(CONFIG, seed=3)
        emitted = session.relocate_food()
        assert emitted[0] == DisplayInd(Position(3, 3), Cell.FREE)
        assert emitted[1].value == Cell.FOOD
        assert session.board.get(3, 3) in (Cell.FREE, Cell.FOOD)
        assert session.board.get(*session.controller.food_position) == Cell.FOOD

    def test_rejected_response_triggers_new_request(self):
        session = GameSession(CONFIG, seed=0)
        emitted = session.dispatch(FoodResp(Position(1, 1)))
        assert emitted[0] == FoodReq()
        assert emitted[1].value == Cell.FOOD
        assert session.food_generator.requests == 1


class TestSessionState:
    def test_state_is_json_serializable(self):
        session = GameSession(CONFIG, seed=0)
        session.tick()
        state = session.get_state()
        serialized = json.dumps(state)
        assert isinstance(serialized, str)
        assert state["snake"] == [[2, 1], [3, 1]]
        assert state["food"] == [3, 3]
        assert state["direction"] == "R"
        assert state["tick"] == 1


class TestSessionOffBoardFood:
    def test_relocate_from_food_beyond_board(self):
        session = GameSession("W 3 3 F 9 9 S R 1 0 0", seed=0)
        emitted = session.relocate_food()
        assert emitted[0] == DisplayInd(Position(9, 9), Cell.FREE)
        fx, fy = session.controller.food_position
        assert session.board.get(fx, fy) == Cell.FOOD
        assert len(session.board.free_cells()) == 7

    def test_relocate_from_negative_food_keeps_snake(self):
        session = GameSession("W 3 3 F -1 0 S D 3 0 0 1 0 2 0", seed=0)
        session.relocate_food()
        for x in range(3):
            assert session.board.get(x, 0) == Cell.SNAKE
        fx, fy = session.controller.food_position
        assert fy > 0
        assert session.board.get(fx, fy) == Cell.FOOD


class TestSessionFailures:
    def test_failed_dispatch_discards_queued_events(self, monkeypatch):
        session = GameSession(CONFIG, seed=0)
        receive = session.controller.receive

        def failing(event):
            # Something already queued behind the failing event.
            session._inbox.append(PauseInd())
            raise RuntimeError("display offline")

        monkeypatch.setattr(session.controller, "receive", failing)
        with pytest.raises(RuntimeError, match="offline"):
            session.dispatch(FoodResp(Position(4, 4)))

        monkeypatch.setattr(session.controller, "receive", receive)
        emitted = session.tick()
        assert not session.paused
        assert emitted == [
            DisplayInd(Position(3, 1), Cell.SNAKE),
            DisplayInd(Position(1, 1), Cell.FREE),
        ]
