"""Message template formatting."""

import re
from typing import Any

PLACEHOLDER = re.compile(r"#\{[^}]*\}")


def fmt(template: str, *values: Any) -> str:
    """
    Fill ``#{...}`` placeholders in a template from positional values.

    Placeholders are replaced left to right with the next value; the name inside
    the braces is only documentation. Placeholders beyond the supplied values are
    filled with ``None``.

    Example:
        >>> fmt("#{attribute} is required", "name")
        'name is required'
        >>> fmt("#{attribute} must match #{testValue}", "foo", "foo_confirmation")
        'foo must match foo_confirmation'
    """
    remaining = iter(values)
    return PLACEHOLDER.sub(lambda _: str(next(remaining, None)), template)
