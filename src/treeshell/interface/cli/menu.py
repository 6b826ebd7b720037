from __future__ import annotations

"""
Interactive Menu Controller.

Drives the menu loop on top of a TreeSession: prints the menu, reads a
choice, dispatches to the matching action and reports the outcome. Any
TreeShellError raised by an action is reported as one line and the loop
goes on with the previous snapshot.
"""

import logging
import sys
from typing import Callable, Dict, Optional, TextIO

from treeshell.core.session import TreeSession
from treeshell.domain.errors import TreeShellError
from treeshell.interface.cli.reader import ConsoleReader
from treeshell.utils.i18n import i18n

logger = logging.getLogger(__name__)

MENU_KEYS = ("show_tree", "search", "mkdir", "touch", "delete", "exit")
EXIT_CHOICE = "6"


class MenuController:
    """
    'View + Controller' pair of the CLI.

    Attributes:
        session: Snapshot session receiving the operations.
        reader: Source of user input.
        out: Stream receiving prompts, results and messages.
    """

    def __init__(self, session: TreeSession, reader: ConsoleReader, out: Optional[TextIO] = None):
        self.session = session
        self.reader = reader
        self.out = out if out is not None else sys.stdout
        self._actions: Dict[str, Callable[[], bool]] = {
            "1": self._show_tree,
            "2": self._search_file,
            "3": self._create_directory,
            "4": self._create_file,
            "5": self._delete_entry,
            EXIT_CHOICE: self._exit,
        }

    # -------------------------------------------------------------------------
    # Loop
    # -------------------------------------------------------------------------

    def run(self) -> None:
        """Process user input until the exit choice or the end of input."""
        while True:
            self._print_menu()
            choice = self.reader.read_char()
            if choice is None:
                self._end_of_input()
                return

            action = self._actions.get(choice)
            if action is None:
                self._say(i18n.t("cli.status.invalid_choice"))
                continue

            logger.debug(f"Menu choice: {choice}")
            try:
                keep_going = action()
            except TreeShellError as e:
                self._report_error(e)
                continue
            if not keep_going:
                return

    # -------------------------------------------------------------------------
    # Actions (return False to leave the loop)
    # -------------------------------------------------------------------------

    def _show_tree(self) -> bool:
        self.session.display(self.out)
        return True

    def _search_file(self) -> bool:
        query = self._ask("cli.prompts.search")
        if query is None:
            return False
        if not query:
            self._say(i18n.t("cli.status.empty_query"))
            return True

        found = self.session.search(query)
        self._say(i18n.t("cli.status.found"))
        for name in found:
            self._say(name)
        return True

    def _create_directory(self) -> bool:
        name = self._ask("cli.prompts.mkdir")
        if name is None:
            return False
        self.session.create_directory(name)
        self._say(i18n.t("cli.status.dir_created", name=name))
        return True

    def _create_file(self) -> bool:
        name = self._ask("cli.prompts.touch")
        if name is None:
            return False
        self.session.create_file(name)
        self._say(i18n.t("cli.status.file_created", name=name))
        return True

    def _delete_entry(self) -> bool:
        name = self._ask("cli.prompts.delete")
        if name is None:
            return False
        self.session.delete_entry(name)
        self._say(i18n.t("cli.status.deleted", name=name))
        return True

    def _exit(self) -> bool:
        self._say(i18n.t("cli.status.exiting"))
        return False

    # -------------------------------------------------------------------------
    # Rendering helpers
    # -------------------------------------------------------------------------

    def _print_menu(self) -> None:
        self._say(i18n.t("cli.menu.title"))
        for key in MENU_KEYS:
            self._say(i18n.t(f"cli.menu.{key}"))
        self._prompt(i18n.t("cli.prompts.choice"))

    def _ask(self, prompt_key: str) -> Optional[str]:
        """Prompt and read one name. None means the input is exhausted."""
        self._prompt(i18n.t(prompt_key))
        answer = self.reader.read_token()
        if answer is None:
            self._end_of_input()
        return answer

    def _end_of_input(self) -> None:
        self._say("")
        self._say(i18n.t("cli.status.end_of_input"))

    def _report_error(self, error: TreeShellError) -> None:
        logger.info(f"Operation failed: {error}")
        self._say(i18n.t(error.message_key, default=str(error), **error.format_args()))

    def _prompt(self, text: str) -> None:
        print(text, end="", file=self.out, flush=True)

    def _say(self, text: str) -> None:
        print(text, file=self.out)
