"""
Field Validation Module

Checks applied to text and flag fields of recipe documents on every
assignment. Invalid input is rejected with a ValidationError naming the
field; nothing is truncated, escaped or replaced with a default.
"""

import re

from ..constants import MAX_LENGTHS
from ..errors import ValidationError

# Control characters (newline and tab are allowed in multi-line fields)
_CONTROL_RE = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]')
_LINE_BREAK_RE = re.compile(r'[\r\n]')


def check_text(value, field, required=True, allow_empty=True, multiline=False, max_length=None):
    """
    Validate a string field and return it unchanged.

    Args:
        value: The value being assigned
        field: Field name, used as the error path and the MAX_LENGTHS key
        required: If False, None is accepted and returned
        allow_empty: If False, blank strings are rejected
        multiline: If False, line breaks are rejected
        max_length: Override for MAX_LENGTHS[field]

    Returns:
        The validated value
    """
    if value is None:
        if required:
            raise ValidationError("is required", path=field)
        return None

    if not isinstance(value, str):
        raise ValidationError(f"must be a string, got {type(value).__name__}", path=field)

    if not allow_empty and not value.strip():
        raise ValidationError("cannot be empty", path=field)

    if _CONTROL_RE.search(value):
        raise ValidationError("contains control characters", path=field)

    if not multiline and _LINE_BREAK_RE.search(value):
        raise ValidationError("must be a single line", path=field)

    limit = max_length or MAX_LENGTHS.get(field)
    if limit and len(value) > limit:
        raise ValidationError(f"is longer than {limit} characters", path=field)

    return value


def check_bool(value, field):
    """Validate a strict boolean (0/1 and strings are rejected)."""
    if not isinstance(value, bool):
        raise ValidationError(f"must be true or false, got {value!r}", path=field)
    return value


def check_tags(tags):
    """Validate tags and return them as an ordered, de-duplicated list."""
    if not isinstance(tags, (list, tuple)):
        raise ValidationError("must be a list of strings", path='tags')
    result = []
    for index, tag in enumerate(tags):
        try:
            check_text(tag, 'tag', allow_empty=False)
        except ValidationError as err:
            err.path = f"tags[{index}]"
            raise
        if tag not in result:
            result.append(tag)
    return result
