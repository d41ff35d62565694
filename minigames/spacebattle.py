"""Turn-based space battle against an alien invader."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable
from enum import IntEnum

MAX_HP = 100


class Action(IntEnum):
    ATTACK = 1
    SHIELD = 2
    HEAL = 3


def _write(text: str) -> None:
    sys.stdout.write(text)


class Battle:
    """Hit points of both sides and the moves that change them."""

    def __init__(self, rng=None, output_fn: Callable[[str], object] | None = None):
        self.rng = rng or random.Random()
        self._write = output_fn or _write
        self.player_hp = MAX_HP
        self.enemy_hp = MAX_HP

    def status(self):
        return f"\n🚀 Your HP: {self.player_hp} | 👾 Alien HP: {self.enemy_hp}\n"

    def player_turn(self, action):
        """Carry out the player's move; return whether the shield is up."""
        try:
            action = Action(action)
        except ValueError:
            self._write("Wrong input! You lost your turn.\n")
            return False

        if action is Action.ATTACK:
            damage = self.rng.randint(10, 30)
            self.enemy_hp -= damage
            self._write(f"You fired your blaster! Damage dealt: {damage}\n")
            return False
        if action is Action.SHIELD:
            self._write("You activated shield! Incoming damage will be halved.\n")
            return True
        heal = self.rng.randint(10, 25)
        self.player_hp = min(self.player_hp + heal, MAX_HP)
        self._write(f"You used med-kit. Healed {heal} HP.\n")
        return False

    def enemy_turn(self, shielded):
        """Let the alien attack, heal or skip."""
        move = self.rng.randint(1, 3)
        if move == 1:
            damage = self.rng.randint(10, 25)
            if shielded:
                damage //= 2
                self._write("Alien attacked but your shield reduced the damage!\n")
            else:
                self._write("Alien attacked fiercely!\n")
            self.player_hp -= damage
            self._write(f"You received {damage} damage.\n")
        elif move == 2:
            heal = self.rng.randint(5, 15)
            self.enemy_hp = min(self.enemy_hp + heal, MAX_HP)
            self._write(f"Alien used alien-serum and healed {heal} HP.\n")
        else:
            self._write("Alien is charging power... skipped its turn!\n")

    def is_over(self):
        return self.player_hp <= 0 or self.enemy_hp <= 0

    def player_won(self):
        return self.player_hp > 0 and self.enemy_hp <= 0


def play(input_fn: Callable[[str], str] | None = None,
         output_fn: Callable[[str], object] | None = None,
         rng=None):
    """Fight until one side falls; return True if the player won."""
    read = input_fn or input
    write = output_fn or _write
    battle = Battle(rng, write)

    write("🚀 Welcome to SPACE BATTLE! 👾\n")
    write("You are Earth's last hope against the alien invader!\n")

    while not battle.is_over():
        write(battle.status())
        write("\n=== Your Turn ===\n")
        raw = read("1. Attack 🔫\n2. Shield 🛡️\n3. Heal 💊\nEnter your move: ")
        try:
            choice = int(raw.strip())
        except ValueError:
            choice = 0
        shield = battle.player_turn(choice)
        if battle.enemy_hp <= 0:
            break
        write("\n--- Alien's Turn ---\n")
        battle.enemy_turn(shield)

    write("\n============================\n")
    if battle.player_hp <= 0:
        write("💀 You lost! The alien invader destroyed Earth!\n")
    else:
        write("🎉 Victory! You saved Earth from the alien!\n")
    write("============================\n")
    return battle.player_won()


def main(argv=None):
    """Command-line entry point."""
    parser = argparse.ArgumentParser(prog="spacebattle", description="Play Space Battle.")
    parser.parse_args(argv)
    try:
        play()
    except (EOFError, KeyboardInterrupt):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())