"""Path parsing utilities."""

import re
from typing import List, Tuple

from .models import Position, ValidationError

_CELL_PATTERN = re.compile(r'^\(?\s*(\d+)\s*,\s*(\d+)\s*\)?$')


def parse_path(text: str) -> Tuple[List[Position], List[ValidationError]]:
    """
    Parse a path string such as ``"0,0 0,1 1,2"`` into positions.

    Cells are separated by whitespace or ``;`` and may be wrapped in
    parentheses. Returns a tuple of (positions, errors).
    """
    tokens = [t for t in re.split(r'[;\s]+(?![^(]*\))', text.strip()) if t]

    positions: List[Position] = []
    errors: List[ValidationError] = []

    if not tokens:
        errors.append(ValidationError(
            code="EMPTY_PATH",
            message="Path string is empty"
        ))
        return positions, errors

    for i, token in enumerate(tokens):
        match = _CELL_PATTERN.match(token)
        if not match:
            errors.append(ValidationError(
                code="INVALID_CELL",
                message=f"Invalid cell format: '{token}' (expected row,col)",
                index=i
            ))
            continue
        positions.append(Position(int(match.group(1)), int(match.group(2))))

    return positions, errors
