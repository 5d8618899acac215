# checkersai

A game of checkers in a pygame window. Play against a friend at the same
screen, or against a computer opponent that looks ahead with minimax search
and alpha-beta pruning.

## Installing

```
pip install .
```

## Playing

```
checkersai
```

This opens a 1024x768 window. The board takes up the left side. The right side
shows the game mode ("vs AI" or "Player vs Player"), the current evaluation of
the position, "Game Over" when the game has ended, and three buttons:

- **vs AI**: start a new game against the computer, which plays Black.
- **vs Player**: start a new game for two players at one screen.
- **Switch sides**: start a new game with the sides swapped. The colours shown
  for the two sides swap, and Black makes the first move.

Your pieces are drawn in green (dark green for kings), the other side's in
red (dark red for kings). Click a piece to select it; small blue markers show
the squares it can legally move to. Click a marked square to move there.

Text is drawn with `inter.ttf` from the current directory. If that file cannot
be loaded, an error is logged and pygame's default font is used instead.

While the game runs, the computer's move search is logged to the console: the
score of each candidate move and the best score found.

### Rules

- White starts at the bottom of the board and moves up; Black starts at the
  top and moves down. Men move one square diagonally forward.
- A capture jumps over an adjacent enemy piece to the empty square behind it.
  If any capture is available, a capture must be made.
- After a capture, if the same piece can capture again, the turn stays with
  that player. Against the computer, such follow-up captures are made
  automatically.
- A man that reaches the far row becomes a king. Kings move and capture one
  square in all four diagonal directions.
- The game ends when one side has no pieces left.

## Using the engine from code

The game logic in `checkersai.board`, `checkersai.piece` and `checkersai.ai`
does not need a window:

```python
from checkersai.board import Board
from checkersai.ai import AI

board = Board()
moves = board.get_all_valid_moves()
board.make_move(moves[0], False)

best = AI().get_best_move(board, 3)
if best is not None:
    board.make_move(best, True)
print(board.evaluate_board())
```

- `Board.get_all_valid_moves()` lists the moves for the side to play
  (`board.current_color`); when a capture exists, only captures are listed.
- `Board.get_valid_moves(piece, check_all_moves)` lists one piece's moves;
  with `check_all_moves=True` they are filtered by the whole position, so the
  compulsory-capture rule applies.
- `Board.get_piece_at(Position(x, y))` returns the piece on a square or `None`.
- `Board.restart(switch_sides, vs_ai)` starts a new game.
- `Board.clone()` returns an independent copy.
- `Board.evaluate_board()` gives a score from White's point of view: higher is
  better for White, lower is better for Black.
- `AI().get_best_move(board, depth)` returns the move with the lowest score,
  or `None` when the side to play has no move.

When `board.vs_ai` is true, a call to `make_move(move, False)` is answered at
once by the computer's reply, searched to `board.ai_depth` turns (7 by
default). Deep searches can take a noticeable time; lower `ai_depth` for a
quicker opponent.

## What it does not do

- A side that still has pieces but no legal move is not declared lost; the
  game only ends when one side has no pieces left.
- There is no undo, no move history, and no saving or loading of games.
- Kings move one square at a time; there are no long-range ("flying") kings.

## Running the tests

```
pip install ".[test]"
pytest
```