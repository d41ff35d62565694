"""A small murder-mystery game: interrogate, investigate, accuse."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from dataclasses import dataclass


@dataclass
class Suspect:
    name: str
    alibi: str
    response: str
    guilty: bool = False

    def describe(self):
        """Text shown when the suspect is interrogated."""
        return (
            f"\nInterrogating {self.name}...\n"
            f"Alibi: {self.alibi}\n"
            f"Response: {self.response}\n"
        )


@dataclass
class Clue:
    location: str
    detail: str

    def describe(self):
        """Text shown when the clue is found."""
        return f"\nClue found at {self.location}: {self.detail}\n"


_MENU = (
    "\nMenu:\n1. Interrogate Suspect\n2. Investigate Clues\n"
    "3. Make Accusation\n4. Exit\nEnter choice: "
)


def _write(text: str) -> None:
    sys.stdout.write(text)


class DetectiveGame:
    """The mansion case with its suspects, clues and three chances."""

    def __init__(self, input_fn: Callable[[str], str] | None = None,
                 output_fn: Callable[[str], object] | None = None):
        self._read = input_fn or input
        self._write = output_fn or _write
        self.chances = 3
        self.suspects = [
            Suspect("Mr. Brown (Butler)", "I was cleaning the dining hall.",
                    "I heard a scream but did not see anything.", False),
            Suspect("Miss Scarlet (Actress)", "I was rehearsing my lines.",
                    "Why would I kill anyone? I am too pretty for jail!", False),
            Suspect("Dr. Grey (Family Friend)", "I was reading in the library.",
                    "This family has secrets... but I am not one of them.", True),
            Suspect("Lady Violet (Widow)", "I was sleeping in my room.",
                    "My husband is gone... now this? I am devastated.", False),
        ]
        self.clues = [
            Clue("Library", "A bloody glove was found near the bookshelf."),
            Clue("Kitchen", "A broken vase with fingerprints was discovered."),
            Clue("Garden", "Footprints leading away from the house."),
        ]

    def _read_int(self, prompt: str) -> int:
        try:
            return int(self._read(prompt).strip())
        except ValueError:
            return 0

    def _pick_suspect(self, prompt: str) -> Suspect | None:
        number = self._read_int(prompt)
        if 1 <= number <= len(self.suspects):
            return self.suspects[number - 1]
        self._write("Invalid choice.\n")
        return None

    def _list_suspects(self) -> None:
        for number, suspect in enumerate(self.suspects, start=1):
            self._write(f"{number}. {suspect.name}\n")

    def show_intro(self):
        self._write(
            "-------------------------------------\n"
            " DETECTIVE MYSTERY GAME \n"
            "-------------------------------------\n"
            "You are Detective Shivansh. A murder has occurred in the mansion.\n"
            "Interrogate suspects, investigate clues, and catch the killer!\n"
        )

    def interrogate_suspects(self):
        """Let the player question one suspect; return that suspect or None."""
        self._write("\nList of Suspects:\n")
        self._list_suspects()
        suspect = self._pick_suspect("\nEnter suspect number to interrogate: ")
        if suspect is not None:
            self._write(suspect.describe())
        return suspect

    def investigate_clues(self):
        self._write("\nInvestigating mansion...\n")
        for clue in self.clues:
            self._write(clue.describe())

    def make_guess(self):
        """Ask for accusations until one is right, chances run out or input is invalid.

        Returns True when the killer is caught.
        """
        while True:
            self._write("\nWho do you think is the murderer?\n")
            self._list_suspects()
            suspect = self._pick_suspect("\nEnter number of your guess: ")
            if suspect is None:
                return False
            if suspect.guilty:
                self._write(f"\nCorrect! You caught the killer: {suspect.name}!\n")
                return True
            self.chances -= 1
            self._write(f"\nWrong guess! Chances left: {self.chances}\n")
            if self.chances <= 0:
                self._write("\nGame Over! The real killer was: Dr. Grey.\n")
                return False

    def start(self):
        """Run the menu loop until the player exits or runs out of chances."""
        self.show_intro()
        actions = {
            1: self.interrogate_suspects,
            2: self.investigate_clues,
            3: self.make_guess,
        }
        while True:
            option = self._read_int(_MENU)
            if option == 4:
                self._write("Exiting game. Goodbye, Detective!\n")
                return
            action = actions.get(option)
            if action is None:
                self._write("Invalid option!\n")
            else:
                action()
            if self.chances <= 0:
                return


def main(argv=None):
    """Command-line entry point."""
    parser = argparse.ArgumentParser(prog="detective", description="Play the detective mystery.")
    parser.parse_args(argv)
    try:
        DetectiveGame().start()
    except (EOFError, KeyboardInterrupt):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())