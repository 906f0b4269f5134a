"""
TUI Data - State shared by the browser's widgets.
"""

from dataclasses import dataclass, field
from typing import Optional

from ..catalog import EXAMPLES, Example, Principle, examples_for, get_example


@dataclass
class BrowserState:
    """What the browser shows and what it has run so far."""

    examples: list[Example] = field(default_factory=lambda: list(EXAMPLES))
    selected_key: Optional[str] = None
    run_log: list[str] = field(default_factory=list)

    def __post_init__(self):
        if self.selected_key is None and self.examples:
            self.selected_key = self.examples[0].key

    def get_selected_example(self) -> Optional[Example]:
        if self.selected_key is None:
            return None
        return get_example(self.selected_key)

    def select_index(self, index: int) -> Example:
        example = self.examples[index]
        self.selected_key = example.key
        return example

    def index_of_selected(self) -> int:
        for i, example in enumerate(self.examples):
            if example.key == self.selected_key:
                return i
        return 0

    def run_selected(self) -> list[str]:
        """Run the selected demonstration and record its transcript."""
        example = self.get_selected_example()
        if example is None:
            return []
        lines = [f"$ {example.key}"] + example.run()
        self.run_log.extend(lines)
        return lines


def create_state(principle: Optional[Principle] = None) -> BrowserState:
    """Create browser state for every example, or one principle's."""
    return BrowserState(examples=examples_for(principle))
