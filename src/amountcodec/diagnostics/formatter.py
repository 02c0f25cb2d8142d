"""Rendering of Diagnostic objects for people and for tools.

Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

_ANSI_RESET = "\033[0m"
_SEVERITY_COLORS = {
    "error": "\033[1;31m",  # bold red
    "warning": "\033[1;33m",  # bold yellow
}


class OutputFormat(StrEnum):
    """Output styles for DiagnosticFormatter."""

    RUST = "rust"  # multi-line, compiler style
    SIMPLE = "simple"  # one line
    JSON = "json"  # one JSON object


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Turn diagnostics into text.

    Attributes:
        output_format: Output style
        sanitize: Cut long user input (message and input_value) to
            max_content_length characters
        color: Wrap the severity in ANSI color codes (RUST style only)
        max_content_length: Cut-off used when sanitize is set

    Example:
        >>> diagnostic = ErrorTemplate.parse_amount_no_digits("abc", "USD")
        >>> print(DiagnosticFormatter().format(diagnostic))
        error[PARSE_AMOUNT_NO_DIGITS]: Amount 'abc' contains no digits
          = currency: USD
          = help: Enter a number such as 1,234.56

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        PARSE_AMOUNT_NO_DIGITS: Amount 'abc' contains no digits
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Render one diagnostic in the configured style."""
        match self.output_format:
            case OutputFormat.RUST:
                return self._render_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {self._clip(diagnostic.message)}"
            case OutputFormat.JSON:
                return self._render_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Render several diagnostics, one blank line between each."""
        return "\n\n".join(map(self.format, diagnostics))

    def _render_rust(self, diagnostic: Diagnostic) -> str:
        label = diagnostic.severity
        if self.color:
            ansi = _SEVERITY_COLORS.get(label, _SEVERITY_COLORS["warning"])
            label = f"{ansi}{label}{_ANSI_RESET}"

        lines = [f"{label}[{diagnostic.code.name}]: {self._clip(diagnostic.message)}"]
        if diagnostic.currency_code:
            lines.append(f"  = currency: {diagnostic.currency_code}")
        if diagnostic.hint:
            lines.append(f"  = help: {diagnostic.hint}")
        return "\n".join(lines)

    def _render_json(self, diagnostic: Diagnostic) -> str:
        payload: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "category": diagnostic.code.category.value,
            "message": self._clip(diagnostic.message),
            "severity": diagnostic.severity,
        }
        if diagnostic.input_value is not None:
            payload["input_value"] = self._clip(diagnostic.input_value)
        if diagnostic.currency_code:
            payload["currency_code"] = diagnostic.currency_code
        if diagnostic.hint:
            payload["hint"] = diagnostic.hint
        return json.dumps(payload, ensure_ascii=False)

    def _clip(self, text: str) -> str:
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
