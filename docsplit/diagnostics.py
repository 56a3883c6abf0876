"""Diagnostics accumulated while chunking and building publications."""

from typing import Literal

from pydantic import BaseModel

DiagnosticLevel = Literal["info", "warning", "error"]


class Diagnostic(BaseModel):
    """A single message reported to the caller."""

    level: DiagnosticLevel
    message: str


class Diagnostics:
    """Collects diagnostics for one operation.

    A caller may pass its own collector into several operations to merge
    their messages into one list.
    """

    def __init__(self) -> None:
        self._messages: list[Diagnostic] = []

    @property
    def messages(self) -> list[Diagnostic]:
        return list(self._messages)

    @property
    def has_errors(self) -> bool:
        return any(m.level == "error" for m in self._messages)

    def info(self, message: str) -> None:
        self._messages.append(Diagnostic(level="info", message=message))

    def warning(self, message: str) -> None:
        self._messages.append(Diagnostic(level="warning", message=message))

    def error(self, message: str) -> None:
        self._messages.append(Diagnostic(level="error", message=message))

    def extend(self, messages: list[Diagnostic]) -> None:
        self._messages.extend(messages)

    def __len__(self) -> int:
        return len(self._messages)
