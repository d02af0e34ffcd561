def compute_indent_level(line: str, indent_size: int) -> float:
    """
    Leading whitespace of a line measured in indent units.

    Tabs count as a single character. Misaligned indentation gives a
    fractional level, which is kept as-is.
    """
    leading = len(line) - len(line.lstrip())
    return leading / indent_size


def indent_for(level: float, indent_size: int) -> str:
    """Spaces for an indent level; fractional levels truncate."""
    return " " * int(level * indent_size)
