"""Data models for validation and key strength results."""

from __future__ import annotations

from dataclasses import dataclass, field

from secure_msg.exceptions import ValidationError


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a single validation check."""

    error: ValidationError | None = None

    @property
    def ok(self) -> bool:
        """Check if the value passed validation."""
        return self.error is None

    @property
    def message(self) -> str:
        """Human-readable failure message, or an empty string on success."""
        return str(self.error) if self.error is not None else ""

    def __str__(self) -> str:
        return "ValidationResult(OK)" if self.ok else f"ValidationResult({self.message})"


@dataclass(frozen=True)
class KeyStrength:
    """Heuristic key strength score with improvement hints."""

    score: int
    suggestions: list[str] = field(default_factory=list)

    @property
    def level(self) -> str:
        """Coarse band used for the strength meter colour."""
        if self.score > 60:
            return "strong"
        if self.score > 30:
            return "medium"
        return "weak"

    def __str__(self) -> str:
        return f"KeyStrength({self.score}%, {self.level})"
