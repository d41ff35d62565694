# minigames

Four small games you play in the terminal. Each game is a command. Each game is also a module that you can drive from Python.

## Installation

```
pip install .
```

## Games

All four commands exit with status 0 when the game ends. They exit with status 1 if input ends (EOF) or you press Ctrl-C.

### Tic-tac-toe: `tictactoe`

Two players share the keyboard on a 3×3 board. The squares are numbered 1 to 9, and a free square shows its number. X moves first. If you enter a square that is taken, a number outside 1–9, or text that is not a number, the game prints `Invalid move! Try again.` and asks the same player again. The game ends when one player has a full row, column or diagonal, or when the board is full.

### Snake-Water-Gun: `snakewatergun`

This is a single round against the computer. Enter your name, then `s` (Snake), `w` (Water) or `g` (Gun). Only the first character of your answer counts. The computer picks at random.

- Snake beats Water.
- Water beats Gun.
- Gun beats Snake.

If you enter anything else, it is shown as "Gun", but for deciding the round it counts as a loss.

### Detective mystery: `detective`

A murder has happened in the mansion. The menu has four options:

1. Interrogate a suspect: pick one of the four, and the game shows their alibi and response.
2. Investigate the clues: the game lists the three clues.
3. Make an accusation.
4. Exit.

A wrong accusation costs one of your three chances, and you are asked again straight away. If you enter a number that does not belong to a suspect, you go back to the menu. The game ends when you name the killer, when you choose Exit, or when your chances run out.

### Space battle: `spacebattle`

You and the alien both start with 100 HP, and HP never goes above 100. Each turn you choose one action:

- **Attack**: deals 10–30 damage to the alien.
- **Shield**: halves the alien's attack damage this turn, rounding down.
- **Heal**: restores 10–25 HP.

Any other input loses your turn.

Then the alien takes its turn. It either attacks for 10–25 damage, heals 5–15 HP, or skips its turn. If your attack brings the alien to 0 HP, it does not get a turn. The battle ends when either side reaches 0 HP.

## Using the games from Python

### Supplying input and output

Each `play` function takes `input_fn` and `output_fn`. So does the `DetectiveGame` constructor.

- `input_fn(prompt)` must return a string. It defaults to `input`.
- `output_fn(text)` receives the text to show. It defaults to writing to standard output.

The games that use chance also take `rng`. Pass any object with `randrange` and `randint`, such as `random.Random(seed)`, to make a game repeatable.

### What each game returns

- `minigames.tictactoe.play()` returns `"X"` or `"O"` for the winner, or `None` for a draw.
- `minigames.snakewatergun.play()` returns an `Outcome`: `DRAW`, `PLAYER` or `COMPUTER`.
- `minigames.spacebattle.play()` returns `True` if you won.
- `minigames.detective.DetectiveGame(...).start()` runs the menu loop.
  - Its `make_guess()` method returns `True` when the killer is caught.
  - Its `interrogate_suspects()` method returns the chosen `Suspect`, or `None`.

### Tic-tac-toe

```python
from minigames.tictactoe import Board, InvalidMove

board = Board()
for square in (1, 2, 3):
    board.place(square, "X")
print(board.has_won("X"))   # True
print(board.is_full())      # False
print(board.render())

try:
    board.place(1, "O")
except InvalidMove:
    print("square 1 is taken")
```

`InvalidMove` is a subclass of `ValueError`.

### Snake-Water-Gun

```python
from minigames.snakewatergun import Choice, Outcome, choice_name, determine_winner

assert determine_winner(Choice.SNAKE, Choice.WATER) is Outcome.PLAYER
assert determine_winner("g", "w") is Outcome.COMPUTER
assert choice_name("w") == "Water"
```

### Space battle

`Battle` holds `player_hp` and `enemy_hp`. It has these methods:

- `player_turn(action)` takes an `Action` or its number. It returns whether the shield is up.
- `enemy_turn(shielded)` plays the alien's turn.
- `is_over()` and `player_won()` report how the battle stands.
- `status()` returns the HP line.

```python
import random
from minigames.spacebattle import Action, Battle

battle = Battle(rng=random.Random(1), output_fn=lambda text: None)
shield = battle.player_turn(Action.SHIELD)
battle.enemy_turn(shield)
print(battle.player_hp, battle.enemy_hp)
```

## Limits

- Scores are not kept between games.
- There are no saved games or settings.
- Tic-tac-toe has no computer opponent.
- The detective story is fixed: it always has the same suspects, clues and killer.

## Running the tests

```
pip install .[test]
pytest
```