# dicecolumns

A two-player dice game for the terminal. Each player has a 3x3 board. On
every turn the player to move rolls a die and places its value in one of
their free cells.

## Rules

### Scoring

Each column scores the sum of its dice. Matching dice in a column multiply:
a value that appears twice in a column counts double each time it appears,
and a value that appears three times counts triple each time. Three sixes in
one column are worth 54.

### Taking from the opponent

Placing a die removes every die of the same value from the same column of
the opponent's board.

### End of a match

The match ends as soon as either board is full. The higher score wins;
equal scores are a draw.

### Characters

Each player also has a character with an ability. After it is used, the
character needs a number of its owner's turns to recover; while recovering,
its symbol shows the turns left.

| Character | Symbol | Cooldown | Ability |
|-----------|--------|----------|---------|
| Ash | `X` | 4 | Destroys one die on either board. Aimed at the opponent's character slot, it puts that character on cooldown instead, and Ash's own cooldown grows (up to 9). |
| Felix | `?` | 2 | Rerolls your die. Every third reroll lands on a 5 or a 6. |
| Columna | `\|` | 4 | Lowers every die in one column of the opponent's board by one; ones are removed. |
| Oliver | `:` | 4 | Swaps two dice, on the same board or across both boards. |

## Installing

```
pip install .
```

## Playing

Start the game with:

```
dicecolumns
```

or, to keep the data files somewhere other than the working directory:

```
dicecolumns --data-dir path/to/dir
```

Enter a username for each player (at most 50 characters, no spaces). A new
username is stored the first time it is used. Both players start with Ash.

### Menu

The main menu offers:

1. Start Game – a new match between the two players
2. Load Game – continue an unfinished match between the same two players
3. and 4. Player details – pick that player's character, or page through
   their finished matches (`n` next page, `p` previous, `0` back)
0. Exit

### Moving and acting

Input during a match is read one line at a time; type a command and press
Enter:

| Input | Action |
|-------|--------|
| `w` / `up` | move up |
| `a` / `left` | move left |
| `s` / `down` | move down |
| `d` / `right` | move right |
| empty line, `e`, `select` | select |
| `q`, `back`, `save` | save the game and leave it |

Arrow-key escape sequences typed on a line are understood too.

Selecting a cell places the rolled die there. The column to the right of
the board is the character slot: selecting it (when the character is not on
cooldown) starts using the ability, after which each selection picks a cell
for it. The ability fires once enough cells are picked; if they are not
allowed, the message is shown and the choice starts over. Felix needs no
cells and fires at once.

Colours are drawn with ANSI escape codes. The screen is cleared between
frames only when output goes to a terminal.

### Where data is kept

Players are stored in `players.txt` as `<id> <username>` lines and games in
`games.txt`, both in the data directory. Games are saved when you leave a
match and when the program exits.

## Using it as a library

The pieces of the game can be used on their own:

```python
from dicecolumns.board import Board
from dicecolumns.characters import CharacterKind
from dicecolumns.die import Die
from dicecolumns.game import Game
from dicecolumns.pcg import Pcg32
from dicecolumns.storage import Player

board = Board()
board.set_value(0, 0, 6)
board.set_value(0, 1, 6)
board.score()  # 24

game = Game(Player("alice", 1), CharacterKind.FELIX,
            Player("bob", 2), CharacterKind.COLUMNA,
            die=Die(Pcg32(42, 54)))
game.place(0, 0)          # player 1 places the rolled die
game.current_character()  # now player 2's Columna
```

- `dicecolumns.pcg.Pcg32` – a seeded PCG32 generator.
- `dicecolumns.die.Die` – a six-sided die (`roll`, `roll_between`).
- `dicecolumns.board` – `Board`, `Point`, `column_score`, `InvalidPositionError`.
- `dicecolumns.characters` – `Ash`, `Felix`, `Columna`, `Oliver`, `CharacterKind`, `NotReadyError`.
- `dicecolumns.game.Game` – turn order, placing, abilities, winner.
- `dicecolumns.storage` – `Player`, `PlayerManager`, `GameManager`, `StorageSystem`.
- `dicecolumns.view.GameView` and `dicecolumns.menu.MainMenu` – the text screens, which take any input and output streams.

## What it does not do

The game does not react to single key presses: every command, including
movement, is a line of input ended with Enter. There is no network play;
both players share one terminal.

## Running the tests

```
pip install .[test]
pytest
```