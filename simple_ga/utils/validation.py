"""Validation error type shared across the engine."""

from __future__ import annotations

from typing import Any


class ValidationError(ValueError):
    """Contract violation with a machine-readable code.

    Example:
        raise ValidationError(
            "invalid_param",
            "num_parents must not exceed population_size",
            param="num_parents",
            value=7,
        )
    """

    def __init__(self, code: str, message: str, **context: Any) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.context = dict(context)

    def __str__(self) -> str:
        if not self.context:
            return f"[{self.code}] {self.message}"
        details = ", ".join(f"{k}={v!r}" for k, v in sorted(self.context.items()))
        return f"[{self.code}] {self.message} ({details})"


__all__ = ["ValidationError"]
