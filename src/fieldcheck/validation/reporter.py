"""
Validation Reporter Components for fieldcheck

This module provides helpers for presenting the error trees returned by
schema validation. It supports:
- Flattening nested errors into dotted field paths
- Human-readable string formatting
- Dictionary conversion
- JSON serialization
"""

import json
from typing import Any, Dict, List, Mapping


class ErrorReporter:
    """
    Reporter for formatting and outputting validation errors.

    All methods are static and accept the ``ValidationErrors`` mapping
    produced by ``validate``.
    """

    @staticmethod
    def flatten(errors: Mapping[str, Any], separator: str = ".") -> Dict[str, List[str]]:
        """
        Flatten a nested error tree into paths.

        Args:
            errors: Error tree returned by validate
            separator: String placed between path segments

        Returns:
            Dict[str, List[str]]: Messages keyed by field path

        Example:
            >>> ErrorReporter.flatten({"address": {"city": ["City is required"]}})
            {'address.city': ['City is required']}
        """
        flat: Dict[str, List[str]] = {}
        for name, value in errors.items():
            if isinstance(value, Mapping):
                for path, messages in ErrorReporter.flatten(value, separator).items():
                    flat[f"{name}{separator}{path}"] = messages
            else:
                flat[str(name)] = list(value)
        return flat

    @staticmethod
    def format_errors(errors: Mapping[str, Any]) -> str:
        """
        Format validation errors as a human-readable string.

        Args:
            errors: Error tree returned by validate

        Returns:
            str: One section per failing field path

        Example:
            >>> print(ErrorReporter.format_errors({"name": ["Name is required"]}))
            Validation failed with the following errors:
              name:
                - Name is required
        """
        flat = ErrorReporter.flatten(errors)
        if not flat:
            return "Validation passed successfully"

        lines = ["Validation failed with the following errors:"]
        for path, messages in flat.items():
            lines.append(f"  {path}:")
            for message in messages:
                lines.append(f"    - {message}")
        return "\n".join(lines)

    @staticmethod
    def to_dict(errors: Mapping[str, Any]) -> Dict[str, Any]:
        """Copy an error tree into plain dicts and lists."""
        result: Dict[str, Any] = {}
        for name, value in errors.items():
            if isinstance(value, Mapping):
                result[str(name)] = ErrorReporter.to_dict(value)
            else:
                result[str(name)] = list(value)
        return result

    @staticmethod
    def to_json(errors: Mapping[str, Any]) -> str:
        """
        Convert validation errors to JSON.

        Args:
            errors: Error tree returned by validate

        Returns:
            str: Indented JSON document mirroring the error tree
        """
        return json.dumps(ErrorReporter.to_dict(errors), indent=2)
