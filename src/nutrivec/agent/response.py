"""JSON response envelope for --json command output."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

SCHEMA_VERSION = "1.0"


@dataclass
class CommandResponse:
    """Envelope shared by every command's JSON output.

    Warnings are non-fatal (for example names dropped from an expression);
    errors mean the command produced no result.
    """

    success: bool
    command: str
    data: dict[str, Any] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)
    human_summary: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "command": self.command,
            "data": self.data,
            "errors": self.errors,
            "warnings": self.warnings,
            "suggestions": self.suggestions,
            "human_summary": self.human_summary,
            "timestamp": datetime.now().isoformat(),
            "schema_version": SCHEMA_VERSION,
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


def success_response(
    command: str,
    data: dict[str, Any],
    human_summary: str = "",
    warnings: Optional[list[str]] = None,
) -> CommandResponse:
    """Create a successful response."""
    return CommandResponse(
        success=True,
        command=command,
        data=data,
        warnings=warnings or [],
        human_summary=human_summary,
    )


def error_response(
    command: str,
    error: str,
    suggestions: Optional[list[str]] = None,
) -> CommandResponse:
    """Create an error response.

    Args:
        command: The command that failed
        error: Error message
        suggestions: Suggestions for fixing the error

    Returns:
        CommandResponse with success=False
    """
    return CommandResponse(
        success=False,
        command=command,
        errors=[error],
        suggestions=suggestions or [],
        human_summary=f"Error: {error}",
    )
