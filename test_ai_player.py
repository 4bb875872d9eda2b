"""
Tests for the computer opponent's move choice.
"""

import pytest

from logic.ai_player import (
    AIPlayer,
    ComputerNoMoveError,
    choose_move,
    explain_move,
    RULE_WIN,
    RULE_BLOCK,
    RULE_CENTER,
    RULE_CORNER,
    RULE_ANY,
)
from logic.board import Board, Mark
from logic.players import PlayerIdentity


def test_empty_board_takes_center():
    assert explain_move(Board(), Mark.X) == ((1, 1), RULE_CENTER)


def test_takes_winning_move():
    board = Board.from_rows(["XX ", "   ", "   "])

    assert explain_move(board, Mark.X) == ((0, 2), RULE_WIN)


def test_win_beats_block():
    # O threatens row 1, but X can finish row 0
    board = Board.from_rows(["XX ", "OO ", "   "])

    assert explain_move(board, Mark.X) == ((0, 2), RULE_WIN)
    assert explain_move(board, Mark.O) == ((1, 2), RULE_WIN)


def test_blocks_opponent():
    board = Board.from_rows(["   ", "OO ", "   "])

    assert explain_move(board, Mark.X) == ((1, 2), RULE_BLOCK)


def test_lowest_winning_cell_in_row_major_order():
    # X wins at (0,2) or (2,0); (0,2) comes first
    board = Board.from_rows(["XX ", "X  ", "   "])

    assert choose_move(board, Mark.X) == (0, 2)


def test_lowest_blocking_cell_in_row_major_order():
    # O threatens (0,2) on row 0 and (1,0) on column 0
    board = Board.from_rows(["OO ", " X ", "O  "])

    assert explain_move(board, Mark.X) == ((0, 2), RULE_BLOCK)


def test_corner_when_center_taken():
    board = Board.from_rows(["   ", " O ", "   "])

    assert explain_move(board, Mark.X) == ((0, 0), RULE_CORNER)


def test_corners_in_fixed_order():
    board = Board.from_rows(["X  ", " O ", "   "])
    assert explain_move(board, Mark.X) == ((0, 2), RULE_CORNER)

    # Only (2,2) is left among the corners, and nobody threatens a line
    board = Board.from_rows(["O X", "XXO", "O  "])
    assert explain_move(board, Mark.X) == ((2, 2), RULE_CORNER)
    assert explain_move(board, Mark.O) == ((2, 2), RULE_CORNER)


def test_block_checked_before_corner():
    # O threatens (2,0) on the anti-diagonal
    board = Board.from_rows(["X O", " O ", "   "])

    assert explain_move(board, Mark.X) == ((2, 0), RULE_BLOCK)


def test_any_cell_when_center_and_corners_taken():
    board = Board.from_rows(["XOX", " O ", "OXX"])
    # X threatens (1,2) down column 2; O must block there
    assert explain_move(board, Mark.O) == ((1, 2), RULE_BLOCK)

    board = Board.from_rows(["XOX", " O ", "OXO"])
    # No wins or blocks left: (1,0) and (1,2) are empty
    assert explain_move(board, Mark.X) == ((1, 0), RULE_ANY)


def test_does_not_modify_board():
    board = Board.from_rows(["XX ", "OO ", "   "])
    before = board.copy()

    choose_move(board, Mark.X)
    choose_move(board, Mark.O)

    assert board == before


def test_same_board_same_move():
    board = Board.from_rows(["X  ", " O ", "  X"])

    moves = {choose_move(board, Mark.O) for _ in range(10)}

    assert len(moves) == 1


def test_full_board_raises():
    board = Board.from_rows(["XOX", "XOO", "OXX"])

    with pytest.raises(ComputerNoMoveError):
        choose_move(board, Mark.X)


def test_ai_player_records_rule():
    ai = AIPlayer(PlayerIdentity.computer(Mark.O))
    board = Board.from_rows(["XX ", "   ", "   "])

    assert ai.get_best_move(board) == (0, 2)
    assert ai.last_rule == RULE_BLOCK


def test_ai_player_verbose_prints_rule(capsys):
    ai = AIPlayer(PlayerIdentity.computer(Mark.X), verbose=True)

    ai.get_best_move(Board())

    assert "rule: center" in capsys.readouterr().out


def test_move_suggestion():
    ai = AIPlayer(PlayerIdentity.computer(Mark.X))

    assert ai.get_move_suggestion(Board()) == "Place X at position (1, 1)"
    assert ai.get_move_suggestion(
        Board.from_rows(["XOX", "XOO", "OXX"])
    ) == "No moves available!"
