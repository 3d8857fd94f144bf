"""
Diagnostics raised while translating a component.

A diagnostic marks a spot where the transformer had to fall back to a
heuristic and the generated code likely needs a manual touch. Diagnostics never
abort a translation. They are delivered to a caller-supplied sink and logged.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto

from loguru import logger


class DiagnosticKind(Enum):
    """What kind of follow-up a diagnostic asks for."""

    MANUAL_RETURN_TYPE = auto()
    REQUIRED_DROPPED = auto()


@dataclass(frozen=True)
class Diagnostic:
    """Actionable note about one translated member.

    Attributes:
        kind: Category of the follow-up
        subject: Name of the member concerned
        message: Human-readable explanation
    """

    kind: DiagnosticKind
    subject: str
    message: str

    def __str__(self) -> str:
        return self.message


DiagnosticSink = Callable[[Diagnostic], None]


class Diagnostics:
    """Accumulating diagnostic sink."""

    def __init__(self) -> None:
        self.items: list[Diagnostic] = []

    def __call__(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def of_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        return [d for d in self.items if d.kind == kind]


def report(sink: DiagnosticSink | None, diagnostic: Diagnostic) -> None:
    """Log a diagnostic and hand it to the sink, if there is one."""
    logger.warning(diagnostic.message)
    if sink is not None:
        sink(diagnostic)
