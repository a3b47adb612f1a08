"""Sensitive data redaction for structured logging."""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional, Pattern, Union


class DataRedactor:
    """Redact user-identifying path prefixes and secrets from log data."""

    def __init__(self, custom_patterns: Optional[List[Pattern[str]]] = None) -> None:
        """Initialize redactor with standard and custom patterns.

        Args:
            custom_patterns: Additional regex patterns to redact
        """
        self.patterns = [
            # User home directories, forward or back slashes; drive form first
            re.compile(r"[A-Za-z]:[/\\]Users[/\\][^/\\\s]+"),
            re.compile(r"/home/[^/\\\s]+"),
            re.compile(r"/Users/[^/\\\s]+"),
            # Tokens and API keys (common patterns)
            re.compile(
                r"(token|key|secret|password|api_key|credential)[\"']?\s*[=:]\s*[\"']?[a-zA-Z0-9_-]{8,}[\"']?",
                re.IGNORECASE,
            ),
        ]

        if custom_patterns:
            self.patterns.extend(custom_patterns)

        self.sensitive_fields = {
            "password",
            "token",
            "secret",
            "key",
            "auth",
            "credential",
            "api_key",
            "access_token",
        }

    def redact_string(self, text: str) -> str:
        """Replace every pattern match in ``text`` with ``[REDACTED]``."""
        result = text
        for pattern in self.patterns:
            result = pattern.sub("[REDACTED]", result)
        return result

    def redact_dict(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively redact sensitive data from dictionary.

        Args:
            data: Dictionary to redact

        Returns:
            Dictionary with sensitive data redacted
        """
        result: Dict[str, Any] = {}

        for key, value in data.items():
            if key.lower() in self.sensitive_fields:
                result[key] = "[REDACTED]"
                continue

            if isinstance(value, dict):
                result[key] = self.redact_dict(value)
            elif isinstance(value, list):
                result[key] = [
                    self.redact_dict(item) if isinstance(item, dict)
                    else self.redact_string(item) if isinstance(item, str)
                    else item
                    for item in value
                ]
            elif isinstance(value, str):
                result[key] = self.redact_string(value)
            else:
                result[key] = value

        return result

    def add_pattern(self, pattern: Union[str, Pattern[str]]) -> None:
        """Add custom redaction pattern.

        Args:
            pattern: Regex pattern (string or compiled) to add
        """
        if isinstance(pattern, str):
            pattern = re.compile(pattern)
        self.patterns.append(pattern)

    def add_sensitive_field(self, field_name: str) -> None:
        self.sensitive_fields.add(field_name.lower())
