"""Four terminal games: tic-tac-toe, snake-water-gun, a detective mystery and a space battle."""

__version__ = "0.1.0"