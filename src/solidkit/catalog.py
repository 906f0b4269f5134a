"""
Catalog - Registry of the SOLID examples.

Every principle has two examples, applied and violated. Each example
knows its explanation (taken from its module docstring) and how to
demonstrate itself.
"""

import inspect
from dataclasses import dataclass
from enum import Enum
from types import ModuleType
from typing import Callable, Optional

from .core.audit import AuditFinding, audit_substitutability
from .core.exceptions import ExampleNotFoundError
from .principles import dip, isp, lsp, ocp, srp


class Principle(Enum):
    """The five SOLID principles."""

    SRP = (
        "Single Responsibility Principle",
        "A class should have only one reason to change, meaning it should have only one responsibility.",
    )
    OCP = (
        "Open-Closed Principle",
        "A class should be open for extension but closed for modification.",
    )
    LSP = (
        "Liskov Substitution Principle",
        "Subtypes should be substitutable for their base types without affecting the correctness of the program.",
    )
    ISP = (
        "Interface Segregation Principle",
        "A class should not be forced to implement interfaces it does not use.",
    )
    DIP = (
        "Dependency Inversion Principle",
        "High-level modules should not depend on low-level modules; both should depend on abstractions.",
    )

    def __init__(self, title: str, statement: str):
        self.title = title
        self.statement = statement

    @property
    def acronym(self) -> str:
        return self.name

    @classmethod
    def from_string(cls, s: str) -> "Principle":
        """
        Resolve a principle from its acronym or title, case-insensitively.

        Raises:
            ExampleNotFoundError: If nothing matches
        """
        text = s.strip().lower()
        for principle in cls:
            if text in (principle.name.lower(), principle.title.lower()):
                return principle
        # Accept titles without the hyphen or the trailing "principle"
        normalized = text.replace("-", " ").removesuffix(" principle")
        for principle in cls:
            title = principle.title.lower().replace("-", " ").removesuffix(" principle")
            if normalized == title:
                return principle
        raise ExampleNotFoundError(f"Unknown principle: {s!r}")


class Variant(Enum):
    """Whether an example follows or breaks its principle."""

    APPLIED = "applied"
    VIOLATED = "violated"


@dataclass(frozen=True)
class Example:
    """One runnable example of a principle."""

    principle: Principle
    variant: Variant
    title: str
    explanation: str
    module: str
    demonstrate: Callable[[], list[str]]

    @property
    def key(self) -> str:
        """Catalog key, e.g. "ocp-applied"."""
        return f"{self.principle.acronym.lower()}-{self.variant.value}"

    def run(self) -> list[str]:
        """Run the demonstration and return its transcript."""
        return self.demonstrate()


def _example(principle: Principle, variant: Variant, module: ModuleType) -> Example:
    title, _, explanation = inspect.cleandoc(module.__doc__ or "").partition("\n\n")
    return Example(
        principle=principle,
        variant=variant,
        title=title.rstrip("."),
        explanation=" ".join(explanation.split()),
        module=module.__name__,
        demonstrate=module.demonstrate,
    )


EXAMPLES: tuple[Example, ...] = tuple(
    _example(principle, variant, getattr(package, variant.value))
    for principle, package in (
        (Principle.SRP, srp),
        (Principle.OCP, ocp),
        (Principle.LSP, lsp),
        (Principle.ISP, isp),
        (Principle.DIP, dip),
    )
    for variant in Variant
)


def get_example(key: str) -> Example:
    """
    Look up an example by key.

    Args:
        key: Example key such as "dip-violated" (case-insensitive)

    Raises:
        ExampleNotFoundError: If no example has that key
    """
    wanted = key.strip().lower()
    for example in EXAMPLES:
        if example.key == wanted:
            return example
    raise ExampleNotFoundError(f"No example named {key!r}")


def examples_for(principle: Optional[Principle] = None) -> list[Example]:
    """All examples, or only those of one principle."""
    if principle is None:
        return list(EXAMPLES)
    return [e for e in EXAMPLES if e.principle is principle]


@dataclass(frozen=True)
class AuditSuite:
    """A group of implementers that claim the same contract."""

    title: str
    example_key: str
    operation: str
    implementers: Callable[[], list]

    def run(self) -> list[AuditFinding]:
        return audit_substitutability(self.implementers(), self.operation)


AUDIT_SUITES: tuple[AuditSuite, ...] = (
    AuditSuite("Bird.fly (LSP applied)", "lsp-applied", "fly",
               lambda: [lsp.applied.Sparrow(), lsp.applied.Penguin()]),
    AuditSuite("Vehicle.drive (LSP violated)", "lsp-violated", "drive",
               lambda: [lsp.violated.Car(), lsp.violated.Boat()]),
    AuditSuite("Flyable.fly (ISP applied)", "isp-applied", "fly",
               lambda: [isp.applied.Sparrow()]),
    AuditSuite("Swimmable.swim (ISP applied)", "isp-applied", "swim",
               lambda: [isp.applied.Penguin()]),
    AuditSuite("Runnable.run (ISP applied)", "isp-applied", "run",
               lambda: [isp.applied.Sparrow(), isp.applied.Penguin()]),
    AuditSuite("Animal.fly (ISP violated)", "isp-violated", "fly",
               lambda: [isp.violated.Sparrow(), isp.violated.Penguin()]),
    AuditSuite("Animal.swim (ISP violated)", "isp-violated", "swim",
               lambda: [isp.violated.Sparrow(), isp.violated.Penguin()]),
    AuditSuite("Animal.run (ISP violated)", "isp-violated", "run",
               lambda: [isp.violated.Sparrow(), isp.violated.Penguin()]),
)
