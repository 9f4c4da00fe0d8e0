"""Input validation utilities for directory filters.

Filter values are always bound as query parameters, so they are normalised
here and never rewritten. A supplied value that matches nothing yields an
empty result, never a wider one.
"""

from profile_api.constants.validation import MAX_SEARCH_LENGTH


def sanitize_search(search: str | None, max_length: int = MAX_SEARCH_LENGTH) -> str | None:
    """Sanitize search input.

    Args:
        search: Raw search string
        max_length: Maximum allowed length

    Returns:
        Trimmed search string, or None when blank
    """
    if search is None:
        return None

    return search[:max_length].strip() or None


def sanitize_department(department: str | None) -> str | None:
    """Normalise a department filter.

    The value is kept verbatim apart from surrounding whitespace: the
    filter is an exact match, so a value no department carries simply
    matches nothing.

    Args:
        department: Raw department string

    Returns:
        Trimmed department string, or None when blank
    """
    if department is None:
        return None

    return department.strip() or None


def escape_like_wildcards(value: str) -> str:
    """Escape SQL LIKE wildcards so they match literally.

    Args:
        value: Raw string value to escape

    Returns:
        Escaped string safe for use in LIKE patterns

    Example:
        >>> escape_like_wildcards("test%value")
        'test\\\\%value'
    """
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
