"""
TUI App - Textual application for browsing the SOLID examples.

Provides:
- Example list with keyboard navigation
- Principle statement and explanation of the highlighted example
- A log of demonstrations run from the browser
"""

from __future__ import annotations

from typing import Any, Optional

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Footer, Header, Log, OptionList, Static
from textual.widgets.option_list import Option

from ..catalog import Example
from .data import BrowserState, create_state


BROWSER_CSS = """
#sidebar {
    width: 36;
    border-right: solid $primary-darken-2;
}

#detail {
    padding: 1 2;
    height: auto;
}

#run-log {
    border-top: solid $primary-darken-2;
    height: 1fr;
}
"""


def describe(example: Example) -> str:
    """Text shown in the detail panel."""
    return "\n\n".join([
        example.title,
        example.principle.statement,
        example.explanation,
        f"Module: {example.module}",
    ])


class SolidBrowser(App):
    """Browse and run the catalog examples."""

    CSS = BROWSER_CSS
    TITLE = "solidkit"

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("r", "run_example", "Run", show=True),
        Binding("c", "clear_log", "Clear log", show=True),
    ]

    def __init__(self, state: Optional[BrowserState] = None, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.state = state or create_state()

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            yield OptionList(
                *(Option(f"{e.key}  {e.variant.value}", id=e.key) for e in self.state.examples),
                id="sidebar",
            )
            with Vertical():
                yield Static(id="detail")
                yield Log(id="run-log")
        yield Footer()

    def on_mount(self) -> None:
        options = self.query_one("#sidebar", OptionList)
        options.focus()
        if self.state.examples:
            options.highlighted = self.state.index_of_selected()
        self._show_selected()

    @on(OptionList.OptionHighlighted, "#sidebar")
    def handle_highlighted(self, event: OptionList.OptionHighlighted) -> None:
        self.state.select_index(event.option_index)
        self._show_selected()

    def action_run_example(self) -> None:
        log = self.query_one("#run-log", Log)
        for line in self.state.run_selected():
            log.write_line(line)

    def action_clear_log(self) -> None:
        self.state.run_log.clear()
        self.query_one("#run-log", Log).clear()

    def _show_selected(self) -> None:
        example = self.state.get_selected_example()
        detail = self.query_one("#detail", Static)
        detail.update(describe(example) if example else "No examples")


def run_tui(state: Optional[BrowserState] = None) -> int:
    """Run the browser until the user quits."""
    SolidBrowser(state).run()
    return 0
