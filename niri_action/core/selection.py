"""Turn a line of picker output back into a selection.

Lines handed to the picker carry their entity's identifier before the first
colon (see formatters). Two resolution modes exist:

- strict: the line must start with an identifier; anything else is an error
- id-or-new: a line with a colon is resolved strictly, a line without one is
  text the user typed that matches nothing in the listing

Empty output means the user dismissed the picker and resolves to a
cancelled selection in both modes.
"""

from typing import Callable, Union

from ..models.selection import Selection
from .errors import SelectionError


SEPARATOR = ":"


def _identifier_part(line: str) -> str:
    return line.split(SEPARATOR, 1)[0].strip()


def parse_numeric_id(line: str) -> int:
    """Parse the numeric ID in front of the first colon.

    Raises:
        SelectionError: If the prefix is not a non-negative integer
    """
    prefix = _identifier_part(line)
    try:
        value = int(prefix)
    except ValueError:
        raise SelectionError(line, f"'{prefix}' is not a numeric id")
    if value < 0:
        raise SelectionError(line, f"'{prefix}' is not a valid id")
    return value


def parse_name(line: str) -> str:
    """Parse the name in front of the first colon.

    Raises:
        SelectionError: If the prefix is empty
    """
    prefix = _identifier_part(line)
    if not prefix:
        raise SelectionError(line, "missing name")
    return prefix


def resolve_strict(
    line: str,
    parse: Callable[[str], Union[int, str]] = parse_numeric_id,
) -> Selection:
    """Resolve picker output that must reference a listed entity.

    Args:
        line: Raw picker output
        parse: Identifier parser (parse_numeric_id or parse_name)

    Returns:
        Identified selection, or cancelled for empty output

    Raises:
        SelectionError: If the identifier cannot be parsed
    """
    line = line.strip()
    if not line:
        return Selection.cancelled()
    return Selection.identified(parse(line))


def resolve_id_or_new(line: str) -> Selection:
    """Resolve picker output that may be a listed workspace or a new name.

    Args:
        line: Raw picker output

    Returns:
        Identified selection for listed entries, free text for typed names,
        cancelled for empty output

    Raises:
        SelectionError: If a line with a colon has no numeric id in front of it
    """
    line = line.strip()
    if not line:
        return Selection.cancelled()
    if SEPARATOR in line:
        return Selection.identified(parse_numeric_id(line))
    return Selection.free_text(line)
