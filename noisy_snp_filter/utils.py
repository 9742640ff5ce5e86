"""Key helpers shared by the aggregator and the call file rewriter."""


def normalize_position_key(position: str | int) -> str:
    """Normalize a position into the key used by the tally map.

    Call files may carry a fractional suffix on the position (reserved for
    insertions, e.g. "100.1"); only the part before the first "." is used.
    Numeric positions lose leading zeros so "0100" and "100" collide.

    Args:
        position: Position as read from a genotype table or call file

    Returns:
        Normalized position key

    Example:
        >>> normalize_position_key("100.1")
        "100"
        >>> normalize_position_key(100)
        "100"
    """
    key = str(position).strip().split(".", 1)[0]
    if key.isdigit():
        key = str(int(key))
    return key


def parse_count(value: str) -> int | None:
    """Parse a non-negative integer field.

    Args:
        value: Raw field text

    Returns:
        The integer, or None if the text is not a non-negative integer
        ("3.0", "-1" and "NA" are all rejected)
    """
    if not (value.isascii() and value.isdigit()):
        return None
    return int(value)


def ratio(numerator: int, denominator: int) -> float:
    """Real-valued ratio that is 0.0 when the denominator is 0."""
    if denominator == 0:
        return 0.0
    return numerator / denominator
