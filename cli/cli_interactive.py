"""
cli_interactive.py - Interactive CLI

Menu-driven shell modelled as a finite-state machine: a stack of menu
states and pure transition functions over it.
"""

import sys
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, NamedTuple, Optional, Tuple

from core import (
    TraversalOptions,
    check_directory, check_find_replace, is_noop, get_logger,
)

from .cli_output import print_header, run_and_report

log = get_logger(__name__)


class MenuState(Enum):
    """Menu state enumeration"""
    MAIN_MENU = "main_menu"
    FIND_AND_REPLACE = "find_and_replace"


class Action(Enum):
    """Menu action enumeration"""
    OPEN = "open"       # Enter find + replace
    AGAIN = "again"     # Run again in the same directory
    NEW = "new"         # Run again with a new directory
    BACK = "back"       # Pop the current state
    QUIT = "quit"       # Leave the shell


class MenuOption(NamedTuple):
    key: str
    title: str
    action: Action


MENU_OPTIONS: Dict[MenuState, Tuple[MenuOption, ...]] = {
    MenuState.MAIN_MENU: (
        MenuOption("1", "Find + Replace", Action.OPEN),
        MenuOption("q", "Quit", Action.QUIT),
    ),
    MenuState.FIND_AND_REPLACE: (
        MenuOption("1", "Again in {dir}", Action.AGAIN),
        MenuOption("2", "New", Action.NEW),
        MenuOption("b", "Back", Action.BACK),
        MenuOption("q", "Quit", Action.QUIT),
    ),
}

Stack = Tuple[MenuState, ...]


def lookup_action(state: MenuState, key: str) -> Optional[Action]:
    """Map a menu key to its action in the given state"""
    for option in MENU_OPTIONS[state]:
        if option.key == key:
            return option.action
    return None


def transition(stack: Stack, action: Action) -> Stack:
    """
    Compute the next state stack

    Args:
        stack: Current stack (top is last)
        action: Chosen action

    Returns:
        New stack; empty means quit
    """
    if action == Action.OPEN:
        return stack + (MenuState.FIND_AND_REPLACE,)
    if action == Action.BACK:
        return stack[:-1]
    if action == Action.QUIT:
        return ()
    # AGAIN / NEW stay in the current state
    return stack


class InteractiveShell:
    """Interactive find/replace shell"""

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
        options: Optional[TraversalOptions] = None,
        rename_root: bool = False,
    ):
        self.input = input_func
        self.output = output
        self.options = options or TraversalOptions()
        self.rename_root = rename_root

    def run(self) -> int:
        """Main loop, returns exit code"""
        stack: Stack = (MenuState.MAIN_MENU,)
        directory: Optional[Path] = None

        try:
            while stack:
                state = stack[-1]
                if state == MenuState.MAIN_MENU:
                    print_header("Renamer", self.output)
                else:
                    directory = self.find_and_replace(directory)

                action = self.choose(state, directory)
                log.debug(f"{state.value}: {action.value}")
                if action != Action.AGAIN:
                    directory = None
                stack = transition(stack, action)
        except EOFError:
            self.output("")

        self.output("Good bye.\n")
        return 0

    def choose(self, state: MenuState, directory: Optional[Path] = None) -> Action:
        """Show the menu for a state and read a valid choice"""
        for option in MENU_OPTIONS[state]:
            self.output(f"{option.key}. {option.title.format(dir=directory)}")
        self.output("")

        while True:
            key = self.input("> ").strip().lower()
            action = lookup_action(state, key)
            if action is not None:
                self.output("")
                return action
            self.output("Invalid input\n")

    def input_directory(self, initial: Optional[Path] = None) -> Path:
        """Input and validate directory"""
        path_str = str(initial) if initial else ""
        while True:
            if not path_str:
                path_str = self.input("Source directory: ").strip()

            if path_str:
                path = Path(path_str).expanduser()
                valid, error = check_directory(path)
                if valid:
                    return path
                self.output(error)

            path_str = ""

    def input_find(self) -> str:
        """Input non-empty find string"""
        while True:
            find = self.input("Find: ")
            if find:
                return find
            self.output("'find' parameter cannot be empty")

    def find_and_replace(self, initial_dir: Optional[Path] = None) -> Path:
        """
        Collect input, confirm and run both passes

        Args:
            initial_dir: Remembered directory (skips the directory prompt)

        Returns:
            Directory after the run, for "Again in ..."
        """
        directory = self.input_directory(initial_dir)
        find = self.input_find()
        replace = self.input("Replace: ")

        if is_noop(find, replace):
            _, error = check_find_replace(find, replace)
            self.output(error)
            return directory

        self.output(f"Replacing \"{find}\" with \"{replace}\" in \"{directory}\"")
        self.output("Enter \"go\" to continue or anything else to abort")
        if self.input("").strip() != "go":
            self.output("Aborting...")
            return directory

        result = run_and_report(
            directory, find, replace,
            rename_root=self.rename_root,
            options=self.options,
            output=self.output,
        )
        self.output("")
        # The root may have been renamed
        return result.root or directory


def interactive_mode(options: Optional[TraversalOptions] = None, rename_root: bool = False) -> int:
    """Interactive mode main loop"""
    return InteractiveShell(options=options, rename_root=rename_root).run()


if __name__ == "__main__":
    sys.exit(interactive_mode())
