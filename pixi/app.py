"""Command entry point: open the window on the game menu."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from pixi.context import StateContext
from pixi.menu import Menu


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="pixi", description="A small collection of arcade games.")
    parser.parse_args(argv)

    context = StateContext()
    if context.load():
        context.transition_to(Menu())
        context.start()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())