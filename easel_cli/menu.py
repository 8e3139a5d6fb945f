"""
Session menu: numbered choices bound to handlers.

Registration order is display order. The menu is built once per session
and dispatched from the session's own loop.
"""

from typing import Callable, Dict, Iterator, NamedTuple


class InvalidChoiceError(LookupError):
    """Raised when the typed token is not a menu choice."""


class MenuEntry(NamedTuple):
    label: str
    handler: Callable[[], None]


class Menu:
    """
    Ordered table of menu choices.

    Example:
        menu = Menu()
        menu.add("1", "Add Shape", session.add_shape)
        menu.add("7", "Exit", session.stop)

        for line in menu.lines():
            print(line)             # "1. Add Shape", "7. Exit"
        menu.dispatch("1")
    """

    def __init__(self):
        self._entries: Dict[str, MenuEntry] = {}

    def add(self, choice: str, label: str, handler: Callable[[], None]) -> None:
        if choice in self._entries:
            raise ValueError(f"Menu choice '{choice}' already taken by {self._entries[choice].label}")
        self._entries[choice] = MenuEntry(label, handler)

    def dispatch(self, choice: str) -> None:
        """
        Run the handler bound to `choice`.

        Raises:
            InvalidChoiceError: If `choice` is not on the menu
        """
        entry = self._entries.get(choice)
        if entry is None:
            raise InvalidChoiceError(
                f"'{choice}' is not a menu choice ({', '.join(self._entries)})"
            )
        entry.handler()

    def lines(self) -> Iterator[str]:
        for choice, entry in self._entries.items():
            yield f"{choice}. {entry.label}"

    def __contains__(self, choice: str) -> bool:
        return choice in self._entries
