"""JSON output formatter for CLI."""

from __future__ import annotations

import json
from typing import Any

from scriptlens.cli.formatters.base import OutputFormat, OutputFormatter
from scriptlens.exceptions import ScriptLensError


class JsonFormatter(OutputFormatter[Any]):
    """Generic JSON formatter for CLI output."""

    def format(self, data: Any, format_type: OutputFormat = OutputFormat.JSON) -> str:  # noqa: ARG002
        """Format data as JSON.

        Objects exposing ``to_dict`` are converted first; sets are emitted as
        sorted lists.

        Args:
            data: Data to format
            format_type: Output format type (ignored, always JSON)

        Returns:
            JSON string
        """
        return json.dumps(self._prepare(data), default=str, indent=2)

    def _prepare(self, data: Any) -> Any:
        if hasattr(data, "to_dict"):
            return data.to_dict()
        if isinstance(data, dict):
            return {str(key): self._prepare(value) for key, value in data.items()}
        if isinstance(data, list | tuple):
            return [self._prepare(item) for item in data]
        if isinstance(data, set | frozenset):
            return sorted(self._prepare(item) for item in data)
        return data

    def format_success(self, message: str, data: Any = None) -> str:
        """Format a success response."""
        response: dict[str, Any] = {"success": True, "message": message}
        if data is not None:
            response["data"] = self._prepare(data)
        return json.dumps(response, default=str, indent=2)

    def format_error_response(self, error: str | Exception, code: int = 1) -> str:
        """Format an error response.

        Args:
            error: Error message or exception
            code: Error code

        Returns:
            JSON string
        """
        response: dict[str, Any] = {"success": False, "code": code}
        if isinstance(error, ScriptLensError):
            response["error"] = error.message
            if error.hint:
                response["hint"] = error.hint
            if error.details:
                response["details"] = error.details
        else:
            response["error"] = str(error)
        return json.dumps(response, default=str, indent=2)
