"""Line-based tile reader shared by the CLI frontends."""

from __future__ import annotations

from typing import Callable

QUIT = 0


def read_tile(
    prompt: str = "Tile to move: ",
    ask: Callable[[str], str] = input,
    retry_prompt: str = "Retry: ",
) -> int:
    """Prompt until the player enters an integer and return it.

    *ask* reads one line given a prompt (``input`` by default, or a Rich
    console's ``input``). End of input is read as ``QUIT`` so that piping
    a finite list of moves ends the session cleanly.
    """
    text = prompt
    while True:
        try:
            raw = ask(text)
        except EOFError:
            return QUIT
        try:
            return int(raw.strip())
        except ValueError:
            text = retry_prompt
