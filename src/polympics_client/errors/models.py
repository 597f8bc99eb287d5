"""Structured error details returned by the API."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ParameterIssue:
    """One rejected parameter from a 422 response.

    The API reports these as ``{"loc": [...], "msg": "...", "type": "..."}``.
    """

    location: tuple[str, ...]
    message: str
    kind: str

    @classmethod
    def from_wire(cls, data: dict[str, Any]) -> "ParameterIssue":
        """Parse an issue from its wire representation.

        Raises:
            KeyError: If a required key is missing.
            TypeError: If ``loc`` is not a list or ``msg``/``type`` are not strings.
        """
        location, message, kind = data["loc"], data["msg"], data["type"]
        if not isinstance(location, list):
            raise TypeError(f"'loc' must be a list, got {type(location).__name__}")
        if not isinstance(message, str) or not isinstance(kind, str):
            raise TypeError("'msg' and 'type' must be strings")
        return cls(location=tuple(str(part) for part in location), message=message, kind=kind)

    def describe(self) -> str:
        """Render the issue as ``loc -> path: msg (type)``."""
        path = " -> ".join(self.location)
        return f"{path}: {self.message} ({self.kind})"
