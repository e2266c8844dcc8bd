"""Diagnostics panel - compiler/linter findings with severity markers."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, NamedTuple, Optional

from rich.text import Text

from .base import SelectableListPanel


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class SeverityStyle(NamedTuple):
    icon: str
    style: str


SEVERITY_STYLES: Dict[Severity, SeverityStyle] = {
    Severity.ERROR: SeverityStyle("✖", "bold red"),
    Severity.WARNING: SeverityStyle("⚠", "yellow"),
    Severity.INFO: SeverityStyle("ℹ", "blue"),
}


@dataclass(frozen=True)
class Diagnostic:
    message: str
    file: str
    line: int
    severity: Severity = Severity.ERROR

    @property
    def location(self) -> str:
        return f"{self.file}:{self.line}"


def sample_diagnostics() -> List[Diagnostic]:
    """Static findings shown until a diagnostics feed is wired in."""
    return [
        Diagnostic("mismatched types: expected `usize`, found `i32`", "src/main.rs", 42, Severity.ERROR),
        Diagnostic("unused variable: `layout`", "src/ui/panels.rs", 17, Severity.WARNING),
        Diagnostic("function `render_tab` is never used", "src/ui/mod.rs", 88, Severity.WARNING),
        Diagnostic("consider using `if let` instead of `match`", "src/lib.rs", 5, Severity.INFO),
    ]


class DiagnosticsPanel(SelectableListPanel[Diagnostic]):
    """
    List of diagnostics. Only up/down are handled; entries are read-only.
    """

    TITLE = "Diagnostics"
    EMPTY_MESSAGE = "No problems"

    def __init__(
        self, diagnostics: Optional[Iterable[Diagnostic]] = None, visible: bool = True
    ) -> None:
        super().__init__(visible)
        self._diagnostics: List[Diagnostic] = list(
            sample_diagnostics() if diagnostics is None else diagnostics
        )

    @property
    def diagnostics(self) -> List[Diagnostic]:
        return list(self._diagnostics)

    def rows(self) -> List[Diagnostic]:
        return self._diagnostics

    def counts(self) -> Dict[Severity, int]:
        """Number of diagnostics per severity, including zero counts."""
        counter = Counter(d.severity for d in self._diagnostics)
        return {severity: counter.get(severity, 0) for severity in Severity}

    def heading(self) -> str:
        counts = self.counts()
        summary = " ".join(
            f"{SEVERITY_STYLES[severity].icon} {count}" for severity, count in counts.items()
        )
        return f"{self.title()} {summary}"

    def render_row(self, item: Diagnostic) -> Text:
        icon, style = SEVERITY_STYLES[item.severity]
        row = Text()
        row.append(f"{icon} ", style=style)
        row.append(item.location, style="cyan")
        row.append(f"  {item.message}")
        return row
