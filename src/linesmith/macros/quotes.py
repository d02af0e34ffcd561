from typing import Optional

from linesmith.logging_config import logger

SINGLE_QUOTE = "'"
BACKTICK = "`"


def swap_string_quotes(line: str, cursor: int, replace_with: str) -> Optional[str]:
    """
    Switch the quotes of the string literal around the cursor.

    Converting to single quotes looks for backticks and vice versa. The
    opening quote is the last one before the cursor, the closing quote the
    first one at or after it.

    Returns:
        The rewritten line, or None when the cursor is not between two quotes.
    """
    search_for = SINGLE_QUOTE if replace_with == BACKTICK else BACKTICK

    quote_start = line.rfind(search_for, 0, cursor)
    quote_end = line.find(search_for, cursor)
    logger.debug(f"Quote search for {search_for!r}: start={quote_start}, end={quote_end}")

    if quote_start == -1 or quote_end == -1:
        return None

    return (
        line[:quote_start]
        + replace_with
        + line[quote_start + 1:quote_end]
        + replace_with
        + line[quote_end + 1:]
    )
