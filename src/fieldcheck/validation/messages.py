"""
Error Message Resolution for Field Validation

This module maps criterion names to the text reported when a field fails that
criterion. Caller overrides always win; otherwise a default template is filled
in with the readable field name. A criterion without a template is an internal
inconsistency: it is logged and reported as a generic message so that user
facing validation keeps working.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from ..utils.formatting import field_readable

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "Unknown error"

DEFAULT_MESSAGES: Dict[str, str] = {
    "required": "{field} is required",
    "only_future": "{field} can't be in the past",
}


def build_default_message(criterion: str, field_name: Any) -> str:
    """
    Build the default message for a criterion.

    Args:
        criterion: Name of the failed criterion
        field_name: Raw field name, formatted with field_readable

    Returns:
        str: Filled-in template, or "Unknown error" when the criterion has none
    """
    template = DEFAULT_MESSAGES.get(criterion)
    if template is None:
        logger.error(
            f"Default message not defined for criteria of type {criterion} "
            f"for field {field_name}"
        )
        return UNKNOWN_ERROR
    return template.format(field=field_readable(field_name))


def get_message(
    overrides: Mapping[str, str], criterion: str, field_name: Any
) -> str:
    """Return the caller override for a criterion, or its default message."""
    custom: Optional[str] = overrides.get(criterion)
    if not custom:
        return build_default_message(criterion, field_name)
    return custom
