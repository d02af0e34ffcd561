"""
Brace-scanner reformatter.

Expands a single line holding object-literal-like `{...}` regions into
indented multi-line text: every nesting level on its own lines, every
comma-separated member on its own line.

This is a character scanner, not a parser. Braces and commas inside
strings or comments are treated as structure.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from linesmith.logging_config import logger
from .indent import compute_indent_level, indent_for


@dataclass
class _Frame:
    """One open region on the scan stack."""
    level: float
    indent_size: int
    parts: List[str] = field(default_factory=list)
    token: str = ""
    # The last emitted part is a nested region's closing brace, still on its line
    after_region: bool = False

    @property
    def indent(self) -> str:
        return indent_for(self.level, self.indent_size)

    def take_token(self) -> str:
        token = self.token.strip()
        self.token = ""
        return token

    def end_region_line(self) -> None:
        if self.after_region:
            self.parts.append("\n")
            self.after_region = False

    def open_nested(self) -> None:
        token = self.take_token()
        self.end_region_line()
        head = f"{token} {{" if token else "{"
        self.parts.append(f"{self.indent}{head}\n")

    def add_member(self) -> None:
        token = self.take_token()
        if self.after_region and not token:
            # Comma belongs to the nested region that just closed: "},"
            self.parts.append(",\n")
            self.after_region = False
            return
        self.end_region_line()
        self.parts.append(f"{self.indent}{token},\n")

    def close(self) -> str:
        token = self.take_token()
        self.end_region_line()
        # An empty token ("{}", or "}" after "},") adds no blank member line
        if token:
            self.parts.append(f"{self.indent}{token}\n")
        self.parts.append(indent_for(self.level - 1, self.indent_size) + "}")
        return "".join(self.parts)

    def flush_pending(self) -> None:
        token = self.take_token()
        self.end_region_line()
        if token:
            self.parts.append(f"{self.indent}{token}")


def reformat_region(
    line: str,
    open_index: int,
    indent_level: float,
    indent_size: int,
) -> Tuple[str, Optional[int]]:
    """
    Reformat the region opened by the brace at open_index.

    Members are indented at indent_level, the closing brace one level
    shallower. Nested regions are kept on an explicit stack rather than
    by recursion.

    Args:
        line: The full line of text
        open_index: Index of the opening `{` in line
        indent_level: Indent level of the region's members
        indent_size: Spaces per indent level

    Returns:
        (region, closing_index). closing_index is None when the brace is
        never closed; region then holds the members emitted so far.
    """
    stack = [_Frame(indent_level, indent_size)]

    for index in range(open_index + 1, len(line)):
        char = line[index]
        frame = stack[-1]

        if char == "{":
            frame.open_nested()
            stack.append(_Frame(frame.level + 1, indent_size))
        elif char == ",":
            frame.add_member()
        elif char == "}":
            region = frame.close()
            stack.pop()
            if not stack:
                return region, index
            parent = stack[-1]
            parent.parts.append(region)
            parent.after_region = True
        else:
            frame.token += char

    logger.debug(f"Brace at index {open_index} is never closed, {len(stack)} region(s) left open")
    for frame in stack:
        frame.flush_pending()
    return "".join(part for frame in stack for part in frame.parts), None


def _is_trailing_brace(line: str, brace_index: int) -> bool:
    """True when the brace is the last non-whitespace character of the line."""
    return len(line.rstrip()) == brace_index + 1


def split_line_to_multiline(line: str, indent_size: int = 4) -> Optional[str]:
    """
    Expand every `{...}` region of a single line.

    Text between regions is kept verbatim. Expansion stops when no further
    `{` is found, when the next `{` ends the line (nothing follows it to
    expand), or when a region is never closed.

    Args:
        line: One line of text, without its line break
        indent_size: Spaces per indent level

    Returns:
        The multi-line replacement, or None when there is nothing to expand.
    """
    open_index = line.find("{")
    if open_index == -1 or _is_trailing_brace(line, open_index):
        return None

    base_level = compute_indent_level(line, indent_size)
    segments: List[str] = []
    last_close = -1

    while True:
        logger.debug(f"Expanding region opened at index {open_index}")
        segments.append(line[last_close + 1:open_index + 1] + "\n")

        region, close_index = reformat_region(line, open_index, base_level + 1, indent_size)
        segments.append(region)

        if close_index is None:
            # The open region consumed the rest of the line
            return "".join(segments)

        last_close = close_index
        open_index = line.find("{", close_index)
        if open_index == -1:
            break
        if _is_trailing_brace(line, open_index):
            logger.debug("Next brace ends the line, keeping it verbatim")
            break

    segments.append(line[last_close + 1:])
    return "".join(segments)
