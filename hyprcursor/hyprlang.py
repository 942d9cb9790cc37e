"""Line-oriented `identifier = value` parsing shared by manifest.hl and meta.hl.

This is a small subset of the hyprlang format: one assignment per line,
split at the first '='. There is no quoting, escaping or comment syntax;
lines without '=' are ignored, and so are identifiers a caller doesn't know.
"""

from collections.abc import Iterator


def parse_line(line: str) -> tuple[str, str] | None:
    """Parse a single assignment line.

    Args:
        line: One line of text

    Returns:
        (identifier, value) with surrounding whitespace trimmed from both,
        or None if the line contains no '='

    Examples:
        >>> parse_line("  hotspot_x = 0.5 ")
        ('hotspot_x', '0.5')
        >>> parse_line("define_size = 32, a.png = b")
        ('define_size', '32, a.png = b')
        >>> parse_line("no assignment here") is None
        True
    """
    identifier, sep, value = line.partition("=")
    if not sep:
        return None
    return identifier.strip(), value.strip()


def iter_assignments(text: str) -> Iterator[tuple[str, str]]:
    """Yield every assignment in text, in order of appearance."""
    for line in text.splitlines():
        assignment = parse_line(line)
        if assignment is not None:
            yield assignment
