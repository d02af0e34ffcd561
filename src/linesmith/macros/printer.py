"""
Structured printer: renders parsed JSON as an object-literal expression.
"""

import json
from typing import Any

from linesmith.exceptions import StructuredInputError
from linesmith.logging_config import logger
from .indent import indent_for


def print_structured(value: Any, indent_size: int = 4, level: float = 1) -> str:
    """
    Render a structured value as source text.

    Mapping members and sequence elements are indented at `level`, the
    closing bracket at `level - 1`. Nested containers are rendered one
    level deeper than the member that holds them. Strings are wrapped in
    single quotes without escaping; other scalars use their JSON text.

    Args:
        value: dict, list, str or JSON scalar (acyclic)
        indent_size: Spaces per indent level
        level: Indent level of the outermost container's members

    Returns:
        Rendered expression, starting with its opening bracket.
    """
    if isinstance(value, dict):
        if not value:
            return "{}"
        members = [
            f"{indent_for(level, indent_size)}{key}: {print_structured(item, indent_size, level + 1)}"
            for key, item in value.items()
        ]
        return "{\n" + ",\n".join(members) + "\n" + indent_for(level - 1, indent_size) + "}"

    if isinstance(value, list):
        if not value:
            return "[]"
        elements = [
            indent_for(level, indent_size) + print_structured(item, indent_size, level + 1)
            for item in value
        ]
        return "[\n" + ",\n".join(elements) + "\n" + indent_for(level - 1, indent_size) + "]"

    if isinstance(value, str):
        return f"'{value}'"

    return json.dumps(value)


def convert_json_to_literal(text: str, indent_size: int = 4, base_level: float = 0) -> str:
    """
    Parse JSON text and print it as an object literal.

    The literal's members sit one level deeper than base_level, the indent
    level of the line the JSON starts on.

    Raises:
        StructuredInputError: If text is not valid JSON.
    """
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise StructuredInputError(e.msg, e.lineno, e.colno) from e

    logger.debug(f"Parsed JSON selection ({type(value).__name__}), printing at level {base_level + 1}")
    return print_structured(value, indent_size, base_level + 1)
