"""
Interactive console front end.

Reads one command per line, applies it to the engine and redraws the
board. The session clock advances with wall-clock time between commands.
"""
import sys
import time
from typing import Callable, List, Optional, TextIO

from sweeper import Engine

from .text import render_board, render_status


HELP_TEXT = """Commands:
  r ROW COL    reveal a cell
  f ROW COL    flag or unflag a cell
  c ROW COL    reveal around a satisfied number
  next         continue after a win or loss
  n            new game at the starting size
  size N       new game at a custom size
  save FILE    save the game
  load FILE    load a saved game
  help         show this help
  q            quit"""


class ConsoleGame:
    """Line-oriented Minesweeper front end."""

    def __init__(
        self,
        engine: Engine,
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.engine = engine
        self.input = input_stream or sys.stdin
        self.output = output_stream or sys.stdout
        self.clock = clock
        self._last_tick = clock()

    def run(self) -> None:
        """Play until the player quits or input ends."""
        self.draw()
        for line in self.input:
            self._tick()
            if not self.execute(line):
                break
            self.draw()

    def draw(self) -> None:
        """Print the board and status line."""
        snapshot = self.engine.get_snapshot()
        self._print(render_board(snapshot))
        self._print(render_status(snapshot))

    def _tick(self) -> None:
        now = self.clock()
        self.engine.tick(now - self._last_tick)
        self._last_tick = now

    def _print(self, text: str) -> None:
        print(text, file=self.output)

    # ========================================================================
    # Commands
    # ========================================================================

    def execute(self, line: str) -> bool:
        """
        Run one command line.

        Returns:
            False if the player asked to quit, True otherwise.
        """
        parts = line.split()
        if not parts:
            return True
        command, args = parts[0].lower(), parts[1:]

        if command in ("q", "quit", "exit"):
            return False
        if command in ("r", "f", "c"):
            self._cell_command(command, args)
        elif command == "next":
            if not self.engine.advance_after_outcome():
                self._print("The game is still in progress.")
        elif command == "n":
            self.engine.new_game()
        elif command == "size":
            self.engine.start_custom_session(" ".join(args))
        elif command in ("save", "load"):
            self._file_command(command, args)
        else:
            self._print(HELP_TEXT)
        return True

    def _cell_command(self, command: str, args: List[str]) -> None:
        try:
            row, col = (int(value) for value in args)
        except ValueError:
            self._print(f"Usage: {command} ROW COL")
            return
        if command == "r":
            self.engine.reveal(row, col)
        elif command == "f":
            self.engine.toggle_flag(row, col)
        else:
            self.engine.chord_reveal(row, col)

    def _file_command(self, command: str, args: List[str]) -> None:
        if len(args) != 1:
            self._print(f"Usage: {command} FILE")
            return
        if command == "save":
            ok = self.engine.save(args[0])
        else:
            ok = self.engine.load(args[0])
        verb = "Saved to" if command == "save" else "Loaded"
        if ok:
            self._print(f"{verb} {args[0]}")
        else:
            self._print(f"Could not {command} {args[0]}")
