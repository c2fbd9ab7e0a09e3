from __future__ import annotations
from typing import Any, Mapping

from hr_core.exceptions import ValidationError


def first_error(errors: Mapping[str, Any]) -> ValidationError:
    """DRF serializer.errors → ValidationError on the first offending field."""
    field, messages = next(iter(errors.items()))
    if isinstance(messages, Mapping):
        return first_error(messages)
    message = messages[0] if isinstance(messages, (list, tuple)) and messages else messages
    return ValidationError(field, str(message))
