"""Interactive menu loop over a loaded FrequencyTracker.

The loop is a small state machine: every handler performs one step of I/O
through the console and returns the next state. Reaching TERMINATED ends
the loop.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, Optional

from src.adapters.console import Console
from src.groceries.tracker import (
    FrequencyTracker,
    PathLike,
    SinkUnavailable,
    SourceUnavailable,
    TrackerError,
    normalize,
)

logger = logging.getLogger(__name__)

MENU_TEXT = (
    "\nMenu Options:\n"
    "1. Look up an item frequency\n"
    "2. Display all item frequencies\n"
    "3. Display frequency histogram\n"
    "4. Exit\n"
)
MENU_PROMPT = "Choose an option (1-4): "
LOOKUP_PROMPT = "Enter item name to search: "
CONFIRM_PROMPT = "Are you sure you want to exit? (y/n): "

EXIT_OK = 0
EXIT_INPUT_CLOSED = 1


class MenuState(Enum):
    MENU_PROMPT = "menu_prompt"
    LOOKUP = "lookup"
    LIST_ALL = "list_all"
    HISTOGRAM = "histogram"
    CONFIRM_EXIT = "confirm_exit"
    TERMINATED = "terminated"


_OPTIONS: Dict[int, MenuState] = {
    1: MenuState.LOOKUP,
    2: MenuState.LIST_ALL,
    3: MenuState.HISTOGRAM,
    4: MenuState.CONFIRM_EXIT,
}


class InvalidMenuChoice(TrackerError):
    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid option: {text!r}")


def parse_menu_choice(text: str) -> MenuState:
    """Map a raw menu answer to the state it selects.

    Non-numeric answers are rejected the same way as out-of-range numbers.
    """
    try:
        option = int(text.strip())
    except ValueError as e:
        raise InvalidMenuChoice(text) from e
    state = _OPTIONS.get(option)
    if state is None:
        raise InvalidMenuChoice(text)
    return state


def is_confirmation(text: str) -> bool:
    stripped = text.strip()
    return bool(stripped) and normalize(stripped[0]) == "y"


def load_and_report(tracker: FrequencyTracker, source: PathLike, console: Console) -> bool:
    """Load `source` into the tracker, reporting a failure on the console."""
    try:
        tracker.load(source)
    except SourceUnavailable as e:
        console.write(f"Error: {e}\n")
        return False
    return True


class MenuLoop:
    def __init__(self, tracker: FrequencyTracker, console: Console, *, backup_file: Optional[str] = None):
        self.tracker = tracker
        self.console = console
        self.backup_file = backup_file
        self._handlers: Dict[MenuState, Callable[[], MenuState]] = {
            MenuState.MENU_PROMPT: self._menu_prompt,
            MenuState.LOOKUP: self._lookup,
            MenuState.LIST_ALL: self._list_all,
            MenuState.HISTOGRAM: self._histogram,
            MenuState.CONFIRM_EXIT: self._confirm_exit,
        }

    def step(self, state: MenuState) -> MenuState:
        return self._handlers[state]()

    def run(self) -> int:
        """Drive the menu until the user confirms exit.

        Returns EXIT_OK after a confirmed exit, or EXIT_INPUT_CLOSED when the
        console input ends first (no backup is written in that case).
        """
        state = MenuState.MENU_PROMPT
        try:
            while state is not MenuState.TERMINATED:
                state = self.step(state)
        except EOFError:
            logger.warning("menu.input closed before exit was confirmed", extra={"state": state.value})
            return EXIT_INPUT_CLOSED
        return EXIT_OK

    def _menu_prompt(self) -> MenuState:
        self.console.write(MENU_TEXT)
        answer = self.console.read_line(MENU_PROMPT)
        try:
            return parse_menu_choice(answer)
        except InvalidMenuChoice:
            logger.info("menu.invalid option", extra={"answer": answer})
            self.console.write("Invalid option. Please try again.\n")
            return MenuState.MENU_PROMPT

    def _lookup(self) -> MenuState:
        query = self.console.read_line(LOOKUP_PROMPT)
        count = self.tracker.lookup(query)
        self.console.write(f'Frequency for "{normalize(query)}": {count}\n')
        return MenuState.MENU_PROMPT

    def _list_all(self) -> MenuState:
        self.console.write(self.tracker.list_all())
        return MenuState.MENU_PROMPT

    def _histogram(self) -> MenuState:
        self.console.write(self.tracker.histogram())
        return MenuState.MENU_PROMPT

    def _confirm_exit(self) -> MenuState:
        answer = self.console.read_line(CONFIRM_PROMPT)
        if not is_confirmation(answer):
            return MenuState.MENU_PROMPT
        try:
            destination = self.tracker.backup(self.backup_file)
            self.console.write(f"Data successfully backed up to {destination}\n")
        except SinkUnavailable as e:
            self.console.write(f"Error: {e}\n")
        self.console.write("Exiting program. Goodbye!\n")
        return MenuState.TERMINATED
