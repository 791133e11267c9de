"""Tests for draw outs and rule-of-2-and-4 equity."""

import logging

import pytest

from pokerheat.game.board import Board, to_board
from pokerheat.game.draws import (
    NO_DRAW, calculate_draws, flush_draw_outs, straight_draw_outs,
)


class TestBoard:
    def test_from_streets(self):
        board = Board.from_streets({"flop": ["Qh", "Jh", "2s"], "turn": ["9c"]})
        assert [str(c) for c in board.cards] == ["Qh", "Jh", "2s", "9c"]
        assert board.street == "turn"
        assert board.cards_to_come == 1

    def test_from_cards_splits_streets(self):
        board = Board.from_cards("Qh,Jh,2s,9c,3d")
        assert len(board.flop) == 3
        assert [str(c) for c in board.turn] == ["9c"]
        assert [str(c) for c in board.river] == ["3d"]
        assert board.street == "river"
        assert board.cards_to_come == 0

    def test_from_cards_drops_cards_past_the_river(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="pokerheat.game.board"):
            board = Board.from_cards("2c,3c,4c,5c,6c,7c,8c")
        assert [str(c) for c in board.flop] == ["2c", "3c", "4c"]
        assert [str(c) for c in board.turn] == ["5c"]
        assert [str(c) for c in board.river] == ["6c"]
        assert len(board) == 5
        assert "past the river" in caplog.text

    def test_from_cards_partial_board(self):
        board = Board.from_cards("Qh,Jh,2s")
        assert board.turn == ()
        assert board.river == ()

    @pytest.mark.parametrize("value,street", [
        (None, "preflop"),
        ({}, "preflop"),
        (["Qh", "Jh"], "preflop"),
        ("Qh,Jh,2s", "flop"),
    ])
    def test_to_board(self, value, street):
        assert to_board(value).street == street

    def test_to_board_passthrough(self):
        board = Board.from_cards("Qh,Jh,2s")
        assert to_board(board) is board

    def test_str(self):
        assert str(Board.from_cards("Qh,Jh,2s")) == "Qh Jh 2s"


class TestFlushDraws:
    def test_flush_draw(self):
        result = calculate_draws(["Ah", "Kh"], {"flop": ["Qh", "Jh", "2s"]})
        assert result.flush_draw_outs == 9

    def test_made_flush_is_not_a_draw(self):
        result = calculate_draws(["Ah", "Kh"], {"flop": ["Qh", "7h", "2h"]})
        assert result.flush_draw_outs == 0
        assert result.total_outs == 0

    def test_flush_draw_outs_helper(self):
        assert flush_draw_outs([0, 0, 0, 0, 1]) == 9
        assert flush_draw_outs([0, 0, 0, 1, 1]) == 0
        assert flush_draw_outs([0] * 5) == 0


class TestStraightDraws:
    def test_open_ended(self):
        result = calculate_draws(["Jh", "Tc"], {"flop": ["9s", "8d", "2c"]})
        assert result.straight_draw_outs == 8
        assert result.total_outs == 8
        assert result.approximate_equity == pytest.approx(0.32)

    def test_open_ended_on_turn_uses_rule_of_two(self):
        result = calculate_draws(["Jh", "Tc"], {"flop": ["9s", "8d", "2c"], "turn": ["3h"]})
        assert result.total_outs == 8
        assert result.approximate_equity == pytest.approx(0.16)

    def test_gutshot(self):
        result = calculate_draws(["9h", "8c"], {"flop": ["6s", "5d", "Kc"]})
        assert result.straight_draw_outs == 4
        assert result.approximate_equity == pytest.approx(0.16)

    def test_run_to_the_ace_is_gutshot(self):
        result = calculate_draws(["Ah", "Kd"], {"flop": ["Qs", "Jc", "3h"]})
        assert result.straight_draw_outs == 4

    def test_run_from_the_deuce_is_gutshot(self):
        result = calculate_draws(["2h", "3d"], {"flop": ["4s", "5c", "Kh"]})
        assert result.straight_draw_outs == 4

    def test_no_draw(self):
        result = calculate_draws(["Ah", "Kd"], {"flop": ["2s", "7c", "Jh"]})
        assert result == NO_DRAW
        assert result.description == "No draw"

    def test_straight_draw_outs_helper(self):
        assert straight_draw_outs([8, 9, 10, 11]) == 8
        assert straight_draw_outs([5, 6, 8, 9]) == 4
        assert straight_draw_outs([14, 2, 3, 4]) == 4
        assert straight_draw_outs([2, 7, 11]) == 0


class TestCombinedDraws:
    def test_combo_draw_sums_outs(self):
        result = calculate_draws(["9h", "8h"], {"flop": ["7h", "6c", "2h"]})
        assert result.flush_draw_outs == 9
        assert result.straight_draw_outs == 8
        assert result.total_outs == 17
        assert result.is_combo_draw
        assert result.approximate_equity == 0.5
        assert result.description == "Flush draw + open-ended straight draw (17 outs)"

    def test_equity_capped(self):
        result = calculate_draws(["Ah", "Kh"], {"flop": ["Qh", "Jh", "2s"]})
        assert result.total_outs == 13
        assert result.approximate_equity == 0.5

    def test_flat_board_list(self):
        from_list = calculate_draws("Jh,Tc", "9s,8d,2c")
        from_streets = calculate_draws("Jh,Tc", {"flop": "9s,8d,2c"})
        assert from_list == from_streets


class TestDegenerateDraws:
    @pytest.mark.parametrize("community", [None, {}, {"flop": ["Qh", "Jh"]}])
    def test_before_the_flop(self, community):
        assert calculate_draws(["Ah", "Kh"], community) == NO_DRAW

    def test_river_has_no_cards_to_come(self):
        board = {"flop": ["Qh", "Jh", "2s"], "turn": ["3c"], "river": ["4d"]}
        result = calculate_draws(["Ah", "Kh"], board)
        assert result == NO_DRAW
        assert not result.has_draw

    def test_equity_range(self):
        for hole, flop in [
            (["9h", "8h"], ["7h", "6c", "2h"]),
            (["Ah", "Kd"], ["2s", "7c", "Jh"]),
            (["Jh", "Tc"], ["9s", "8d", "2c"]),
        ]:
            equity = calculate_draws(hole, {"flop": flop}).approximate_equity
            assert 0.0 <= equity <= 0.5
