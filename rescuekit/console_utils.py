"""Helpers for menu-driven console programs."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

InputFunc = Callable[[str], str]


def _read_integer(prompt: str, input_func: InputFunc, output: TextIO) -> int:
    while True:
        answer = input_func(prompt)
        try:
            return int(answer.strip())
        except ValueError:
            print("Illegal integer format. Try again.", file=output)


def make_selection_from(
    title: str,
    options: Sequence[str],
    input_func: InputFunc | None = None,
    output: TextIO | None = None,
) -> int:
    """Show numbered ``options`` and prompt until a valid index is entered.

    Returns the index of the chosen option. Raises ``ValueError`` if there
    are no options to choose from.
    """
    if not options:
        raise ValueError("Internal error: Requesting the user to pick an item from an empty list.")
    read = input_func if input_func is not None else input
    out = output if output is not None else sys.stdout

    print(title, file=out)
    for index, option in enumerate(options):
        print(f"{index} {option}", file=out)

    while True:
        choice = _read_integer("Your choice: ", read, out)
        if 0 <= choice < len(options):
            return choice
        print(f"Please enter a number between 0 and {len(options) - 1}", file=out)


def make_file_selection(
    suffix: str,
    directory: str = "res/",
    input_func: InputFunc | None = None,
    output: TextIO | None = None,
) -> str:
    """Ask the user to pick a file ending in ``suffix`` from ``directory``.

    Returns the path of the chosen file, formed as the directory (with a
    trailing slash) followed by the file name.
    """
    listing_dir = directory or "."
    options = sorted(name for name in os.listdir(listing_dir) if name.endswith(suffix))

    effective_directory = directory or "."
    if not effective_directory.endswith("/"):
        effective_directory += "/"

    choice = make_selection_from(
        "Please choose a demo file from this list:", options, input_func, output
    )
    return effective_directory + options[choice]