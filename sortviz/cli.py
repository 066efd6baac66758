"""Interactive command that builds a data set and shows it being sorted."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from . import ansi
from .algorithms import Visualizer, choose_data_type, sort
from .dlist import DoublyList
from .generate import generate

PAUSE_PROMPT = "Press Enter to continue . . . "


def pause(stream: TextIO | None = None, out: TextIO | None = None) -> None:
    """Wait until the user presses Enter; end of input also continues."""
    out = out or sys.stdout
    out.write(PAUSE_PROMPT)
    out.flush()
    (stream or sys.stdin).readline()


def run(
    stream: TextIO | None = None,
    out: TextIO | None = None,
    delay: float = 0.5,
) -> DoublyList:
    """Run the whole session and return the list as it ends up."""
    out = out or sys.stdout
    out.write(
        f"{ansi.CYAN}\nSelect which data type you would like to sort\n"
        '("C" for characters, "I" integers, and "A" for asterisk bars): '
        f"{ansi.WHITE}"
    )
    kind = choose_data_type(stream, out)
    dlist = DoublyList(kind)
    generate(kind, dlist, stream, out)

    out.write(
        f"{ansi.CYAN}\ncurrent items stored in the data list: {len(dlist)}"
        f"\ncurrent data in DataList:\n{ansi.RESET}"
    )
    dlist.print(out)
    pause(stream, out)

    sort(dlist, stream, out, Visualizer(out, delay))

    out.write(
        f"{ansi.CLEAR_SCREEN}{ansi.CYAN}"
        f"\ndata after sorting has been completed:\n{ansi.RESET}"
    )
    dlist.print(out)
    out.write(
        f"{ansi.BOLD}{ansi.BG_WHITE}\ndLL cleared, terminating program{ansi.RESET}\n"
    )
    pause(stream, out)
    return dlist


def main(argv: list[str] | None = None) -> int:
    """Parse the command line and run an interactive session."""
    parser = argparse.ArgumentParser(
        prog="sortviz", description="Watch sorting algorithms rearrange a list."
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=0.5,
        help="seconds to wait after drawing each step (default: 0.5)",
    )
    args = parser.parse_args(argv)
    try:
        run(delay=args.delay)
    except (EOFError, KeyboardInterrupt):
        sys.stdout.write(f"{ansi.RESET}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())