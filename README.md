# intcheckers

International checkers on a 10x10 board. You can play against another person or
against a computer opponent that searches a few moves ahead with minimax. The game
runs in a pygame window or as text in a terminal.

## Installing

```
pip install .
```

This also installs `pygame`, which draws the window.

## Playing

```
intcheckers
```

With no options, this opens a window with compulsory capture and the computer
opponent both turned on. Player one has the light pieces and moves first. Player two
has the dark pieces, and the computer plays them when it is enabled.

To move, click a piece and then click the square it should go to. Clicking the same
square twice cancels the selection. The window title shows whose turn it is, says
when a capture is compulsory, and announces the winner.

Options:

- `--terminal`: play in the terminal instead of a window.
- `--moves FILE`: read terminal moves from `FILE`. This implies `--terminal`. Blank
  lines before a move are skipped, and the game stops when the file runs out.
- `--no-force-capture`: players are not obliged to capture.
- `--no-ai`: a second person plays the dark pieces.

In the terminal, type each move as `origin destination`, for example `b3 c4`.

- A square is written as two characters. The first is a column letter `a`–`j` or a
  digit `0`–`9`. The second is a row digit `0`–`9`, counted from the bottom.
- Malformed input is answered with `Invalid indices`.
- Typing `exit` leaves the game.

After each move the board is printed again, together with a message saying whether
the move succeeded.

## Rules as played

- Men move one square diagonally forward.
- A man captures by jumping over an adjacent enemy piece. It may also jump
  backwards to capture.
- A man that reaches the far row becomes a king.
- Kings move any distance along a diagonal. A king may capture one piece anywhere
  along that diagonal.
- With compulsory capture on:
  - A player who can capture must capture. Any other move is refused.
  - A piece that has just captured and can capture again keeps the turn.
- A player wins by taking all of the opponent's pieces.

## Using it as a library

```python
from intcheckers.board import Point
from intcheckers.game import Checkers
from intcheckers.ai import Ai

game = Checkers(force_capture=True, enable_ai=True)
game.make_move(Point(1, 6), Point(0, 5))
print(game.render())

ai = Ai(game, depth=3)
reply = ai.generate_sync()
if reply is not None:
    game.make_move(reply.origin, reply.dest)
```

Modules:

- `intcheckers.board`
  - `Board` holds the position.
  - Move generation: `moves_for_piece`, `moves_for_player`.
  - Capture checks: `piece_can_capture`, `player_can_capture`.
  - Moves are applied with `try_move_or_capture`, which returns a `MoveStatus`.
- `intcheckers.game`
  - `Checkers` tracks turns, the `GameState` and the winner.
  - `make_move` raises `GameOverError` once the game has ended.
- `intcheckers.ai`
  - `Ai` picks moves for player two.
  - Use `generate_sync` to search right away.
  - Alternatively, `generate_async` starts a background search, and
    `try_get_move` collects its result.
  - `heuristics` scores a board from the dark side's point of view.
- `intcheckers.terminal_ui` and `intcheckers.gui` hold the two front ends.
  - Each has a `run(game)` function.

## Limitations

- The game never ends in a draw. There is no move limit and no repetition rule.
- A player who has pieces left but no legal move is not declared the loser. In the
  terminal with the computer opponent, the game then stops and prints
  `Something went wrong...`.
- There is no saving or loading of games.
- There is no undo.

## Running the tests

```
pip install .[test]
pytest
```