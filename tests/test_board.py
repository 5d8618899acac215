import pytest

from checkersai.board import Board
from checkersai.piece import Move, Piece, PieceColor, PieceType, Position

WHITE = PieceColor.WHITE
BLACK = PieceColor.BLACK
MAN = PieceType.MAN
KING = PieceType.KING


def _setup(whites, blacks, turn=WHITE):
    board = Board()
    board.white_pieces = [Piece(kind, WHITE, Position(x, y)) for kind, x, y in whites]
    board.black_pieces = [Piece(kind, BLACK, Position(x, y)) for kind, x, y in blacks]
    board.white_pieces_count = len(board.white_pieces)
    board.black_pieces_count = len(board.black_pieces)
    board.current_color = turn
    return board


def test_initial_position():
    board = Board()
    assert len(board.white_pieces) == 12
    assert len(board.black_pieces) == 12
    assert board.current_color is WHITE
    assert not board.game_over
    assert board.bottom_player_white


def test_initial_evaluation_is_balanced():
    assert Board().evaluate_board() == 0


def test_initial_white_moves():
    moves = Board().get_all_valid_moves()
    assert len(moves) == 7
    assert all(m.capture_piece is None for m in moves)
    assert all(m.new_pos.y == 4 and m.piece.position.y == 5 for m in moves)


def test_get_piece_at():
    board = Board()
    piece = board.get_piece_at(Position(0, 7))
    assert piece.color is WHITE and piece.kind is MAN
    assert board.get_piece_at(Position(1, 0)).color is BLACK
    assert board.get_piece_at(Position(0, 0)) is None


def test_simple_move_changes_turn():
    board = Board()
    piece = board.get_piece_at(Position(0, 5))
    board.make_move(Move(piece, Position(1, 4)), False)
    assert board.get_piece_at(Position(1, 4)) is piece
    assert board.get_piece_at(Position(0, 5)) is None
    assert board.current_color is BLACK


def test_wrong_colour_has_no_moves():
    board = Board()
    black = board.get_piece_at(Position(0, 1))
    assert board.get_valid_moves(black) == []


def test_captures_are_compulsory():
    board = _setup([(MAN, 2, 5), (MAN, 6, 5)], [(MAN, 3, 4)])
    moves = board.get_all_valid_moves()
    assert [m.new_pos for m in moves] == [Position(4, 3)]
    assert moves[0].capture_piece.position == Position(3, 4)
    other = board.get_piece_at(Position(6, 5))
    assert board.get_valid_moves(other, True) == []
    assert len(board.get_valid_moves(other, False)) == 2


def test_capture_removes_piece_and_ends_game():
    board = _setup([(MAN, 2, 5)], [(MAN, 3, 4)])
    (move,) = board.get_all_valid_moves()
    board.make_move(move, False)
    assert board.black_pieces == []
    assert board.black_pieces_count == 0
    assert board.game_over
    assert board.get_piece_at(Position(4, 3)).color is WHITE


def test_pending_second_jump_keeps_turn():
    board = _setup([(MAN, 2, 5)], [(MAN, 3, 4), (MAN, 5, 2), (MAN, 0, 1)])
    (move,) = board.get_all_valid_moves()
    board.make_move(move, False)
    assert board.current_color is WHITE
    follow = board.get_all_valid_moves()
    assert [m.new_pos for m in follow] == [Position(6, 1)]


def test_second_jump_played_automatically_against_ai():
    board = _setup([(MAN, 2, 5)], [(MAN, 3, 4), (MAN, 5, 2)])
    board.vs_ai = True
    (move,) = board.get_all_valid_moves()
    board.make_move(move, False)
    assert board.get_piece_at(Position(6, 1)).color is WHITE
    assert board.black_pieces == []
    assert board.game_over


def test_white_man_promoted_on_top_row():
    board = _setup([(MAN, 1, 1)], [(MAN, 7, 0)])
    piece = board.get_piece_at(Position(1, 1))
    board.make_move(Move(piece, Position(0, 0)), False)
    assert piece.kind is KING


def test_black_man_promoted_on_bottom_row():
    board = _setup([(MAN, 0, 7)], [(MAN, 5, 6)], BLACK)
    piece = board.get_piece_at(Position(5, 6))
    board.make_move(Move(piece, Position(4, 7)), False)
    assert piece.kind is KING


def test_king_moves_in_all_directions():
    board = _setup([(KING, 3, 3)], [(MAN, 7, 0)])
    king = board.get_piece_at(Position(3, 3))
    targets = {m.new_pos for m in board.get_valid_moves(king)}
    assert targets == {Position(2, 2), Position(4, 2), Position(2, 4), Position(4, 4)}


def test_king_captures_backwards():
    board = _setup([(KING, 3, 3)], [(MAN, 4, 4)])
    king = board.get_piece_at(Position(3, 3))
    jumps = [m for m in board.get_valid_moves(king) if m.capture_piece is not None]
    assert [m.new_pos for m in jumps] == [Position(5, 5)]


def test_king_value_in_evaluation():
    assert _setup([(KING, 3, 3)], []).evaluate_board() == 25
    assert _setup([], [(KING, 3, 3)]).evaluate_board() == -25


@pytest.mark.parametrize("x,y", [(0, 1), (3, 4), (6, 7)])
def test_mirrored_men_cancel_out(x, y):
    board = _setup([(MAN, x, 7 - y)], [(MAN, 7 - x, y)])
    assert board.evaluate_board() == 0


def test_clone_is_independent():
    board = Board()
    copy = board.clone()
    piece = copy.get_piece_at(Position(0, 5))
    copy.make_move(Move(piece, Position(1, 4)), False)
    assert board.get_piece_at(Position(0, 5)) is not None
    assert board.get_piece_at(Position(1, 4)) is None
    assert board.current_color is WHITE
    assert copy.current_color is BLACK


def test_clone_copies_state():
    board = _setup([(KING, 3, 3)], [(MAN, 4, 4)], BLACK)
    board.vs_ai = True
    copy = board.clone()
    assert copy.white_pieces == board.white_pieces
    assert copy.black_pieces == board.black_pieces
    assert copy.current_color is BLACK
    assert copy.vs_ai


def test_switch_sides_passes_first_turn():
    board = Board()
    board.restart(True)
    assert not board.bottom_player_white
    assert board.current_color is BLACK
    assert board.white_pieces[0].position == Position(0, 7)
    board.restart(True)
    assert board.bottom_player_white
    assert board.current_color is WHITE


def test_restart_sets_opponent_mode():
    board = Board()
    board.restart(False, True)
    assert board.vs_ai
    assert board.current_color is WHITE
    board.restart(False, False)
    assert not board.vs_ai


def test_ai_replies_after_player_move():
    board = Board()
    board.restart(False, True)
    board.ai_depth = 1
    start_black = {p.position for p in board.black_pieces}
    piece = board.get_piece_at(Position(0, 5))
    board.make_move(Move(piece, Position(1, 4)), False)
    assert board.current_color is WHITE
    assert {p.position for p in board.black_pieces} != start_black
    assert len(board.black_pieces) == 12