"""A bar of buttons that report a response id when clicked."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

CSS_NAME = "trashbuttonbar"
CONTENT_STYLE_CLASS = "trash-button-bar-content"
ACTIONS_STYLE_CLASS = "trash-button-bar-actions"


@dataclass
class Button:
    """A button in the action area of a :class:`ButtonBar`."""

    text: str
    response_id: int
    sensitive: bool = True
    use_underline: bool = True
    tooltip: str | None = None
    style_classes: set[str] = field(default_factory=set)


class ButtonBar:
    """A content area above a row of buttons, each tied to a response id.

    Clicking a button calls every ``response`` callback with the button's
    response id. The bar starts revealed.
    """

    def __init__(self) -> None:
        self.content_area: list[Any] = []
        self.buttons: list[Button] = []
        self.revealed = True
        self._callbacks: list[Callable[[int], Any]] = []

    def add_button(self, text: str, response_id: int) -> Button:
        """Append a button with ``text`` that responds with ``response_id``."""
        if text is None:
            raise TypeError("button text must be a string")
        button = Button(text=text, response_id=response_id)
        self.buttons.append(button)
        return button

    def connect_response(self, callback: Callable[[int], Any]) -> None:
        """Call ``callback`` with the response id whenever a button is clicked."""
        self._callbacks.append(callback)

    def _find_button(self, response_id: int) -> Button:
        for button in self.buttons:
            if button.response_id == response_id:
                return button
        raise KeyError(f"no button for response id {response_id}")

    def click(self, response_id: int) -> bool:
        """Click the button for ``response_id``.

        Returns whether the response was emitted; an insensitive button
        does nothing.
        """
        button = self._find_button(response_id)
        if not button.sensitive:
            return False
        for callback in list(self._callbacks):
            callback(button.response_id)
        return True

    def add_response_style_class(self, response_id: int, style: str) -> None:
        """Add a style class to the button for ``response_id``."""
        if style is None:
            raise TypeError("style must be a string")
        self._find_button(response_id).style_classes.add(style)

    def set_response_sensitive(self, response_id: int, sensitive: bool) -> None:
        """Make the button for ``response_id`` clickable or not."""
        self._find_button(response_id).sensitive = bool(sensitive)