"""Line-oriented ``key=value`` text format."""

COMMENT_PREFIX = "#"
SEPARATOR = "="

# Unicode White_Space characters. str.strip() with no argument also removes
# the \x1c-\x1f separators, which are kept as part of keys and values.
WHITESPACE = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def parse_line(line: str) -> tuple[str, str] | None:
    """Parse one line into a (key, value) pair.

    Returns None for blank lines, comments, and lines without a separator.
    Only the first separator splits, so values may contain "=".
    """
    line = line.strip(WHITESPACE)
    if not line or line.startswith(COMMENT_PREFIX):
        return None

    key, sep, value = line.partition(SEPARATOR)
    if not sep:
        return None
    return key.strip(WHITESPACE), value.strip(WHITESPACE)


def format_entry(key: str, value: str) -> str:
    """Render one entry as a line, newline included."""
    return f"{key} {SEPARATOR} {value}\n"
