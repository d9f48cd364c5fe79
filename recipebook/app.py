"""The application window: an information menu around the recipe form."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from recipebook.carousel_form import RecipeCarouselForm
from recipebook.form_fields import TextAreaField, TextField, TextListField

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], Any]

TOPICS: Dict[str, Tuple[str, str]] = {
    "help": ("Recipe Book Help Menu", ""),
    "navigation": ("Recipe Book Navigation", ""),
    "license": ("License", ""),
    "contribute": (
        "Contribute",
        "To contribute to this project, simply clone the project and add a "
        "pull request. Contributions are welcome in any way!",
    ),
    "contact": (
        "Contact the Developper",
        "You can contact me at [email]; I always try to "
        "answer when I can, but it can certainly take a bit of time, so "
        "please don't worry if I don't answer immediately!",
    ),
}

COMMANDS = (
    "Commands: :next, :back, :remove <row>, :quit, "
    + ", ".join(f":{topic}" for topic in TOPICS)
)
STEP_INCOMPLETE = "This step is not complete yet."


class MainWindow:
    """Drives the recipe form through line-based input and output."""

    def __init__(
        self,
        input_fn: Optional[InputFn] = None,
        output_fn: Optional[OutputFn] = None,
    ) -> None:
        self._input = input_fn if input_fn is not None else input
        self._output = output_fn if output_fn is not None else print
        self.form = RecipeCarouselForm()
        self.submitted: Optional[Dict[str, Any]] = None
        self.form.form_completed.connect(self._on_completed)

    def _on_completed(self, data: Dict[str, Any]) -> None:
        self.submitted = data

    def show_info(self, topic: str) -> Tuple[str, str]:
        """Show the title and message of a menu topic and return them."""
        try:
            title, message = TOPICS[topic]
        except KeyError:
            raise ValueError(f"unknown topic: {topic!r}") from None
        self._output(title)
        if message:
            self._output(message)
        return title, message

    def _show_step(self) -> None:
        step = self.form.current_step
        if step is None:
            return
        label = getattr(step, "label", step.title)
        self._output(f"[{self.form.current_index + 1}/{len(self.form.steps)}] {label}")
        if isinstance(step, TextListField):
            for row, item in enumerate(step.items):
                self._output(f"  {row}: {item}")

    def _edit_step(self, line: str) -> None:
        step = self.form.current_step
        if isinstance(step, (TextField, TextAreaField)):
            step.set_text(line)
        elif isinstance(step, TextListField):
            step.add_item(line)

    def _remove_rows(self, arguments: List[str]) -> None:
        step = self.form.current_step
        if not isinstance(step, TextListField):
            self._output("Nothing to remove on this step.")
            return
        try:
            step.remove_items(int(arg) for arg in arguments)
        except (ValueError, IndexError) as error:
            self._output(f"Cannot remove: {error}")
            return
        self._show_step()

    def _handle(self, line: str) -> bool:
        """Handle one input line; return False when the user quits."""
        if not line.startswith(":"):
            self._edit_step(line)
            return True

        command, *arguments = line[1:].split()
        if command == "quit":
            return False
        if command == "next":
            before = self.form.current_index
            self.form.show_next()
            if self.submitted is None:
                if self.form.current_index == before:
                    self._output(STEP_INCOMPLETE)
                self._show_step()
        elif command == "back":
            self.form.show_previous()
            self._show_step()
        elif command == "remove":
            self._remove_rows(arguments)
        elif command in TOPICS:
            self.show_info(command)
        else:
            self._output(f"Unknown command: {command}")
        return True

    def run(self) -> Optional[Dict[str, Any]]:
        """Run until the form is completed; return its data, or None on quit."""
        self._output(COMMANDS)
        self._show_step()
        while self.submitted is None:
            try:
                line = self._input("> ")
            except EOFError:
                return None
            if not self._handle(line.rstrip("\n")):
                return None
        self._output(f"Recipe submitted: {self.submitted}")
        return self.submitted


def main(argv: Optional[List[str]] = None) -> int:
    """Start the application on the terminal."""
    MainWindow().run()
    return 0