"""
Symbol Resolution Passes
========================

The first two passes of the assembler. Both walk the cleaned source in
order and return a new read-only table; neither touches global state.

Pass 1 - Labels
---------------
``resolve_labels`` maps each label declaration, delimiters included, to
the index of the instruction that follows it. Label lines do not count as
instructions::

    @0          index 0
    (LOOP)      -> "(LOOP)": 1
    D=D+1       index 1
    @LOOP       index 2

The first declaration of a name wins; later ones are ignored.

Pass 2 - Variables
------------------
``allocate_variables`` hands out RAM addresses, starting at 16, to every
``@name`` operand that is not a decimal literal, a label or a predefined
symbol. Addresses follow first-occurrence order, so the same source
always produces the same table.
"""

import logging
import re
from types import MappingProxyType
from typing import Iterable, Mapping, Union

from hack_asm.assembler.preprocessor import SourceLine
from hack_asm.cpu import (
    ADDRESS_PREFIX,
    LABEL_CLOSE,
    LABEL_OPEN,
    VARIABLE_BASE,
    is_predefined_symbol,
)

logger = logging.getLogger(__name__)

LITERAL_PATTERN = re.compile(r"[0-9]+")

Line = Union[str, SourceLine]


# =============================================================================
# Line Classification
# =============================================================================

def line_text(line: Line) -> str:
    """Return the trimmed text of a raw string or SourceLine."""
    return str(line).strip()


def is_label_line(text: str) -> bool:
    return text.startswith(LABEL_OPEN)


def is_address_line(text: str) -> bool:
    return text.startswith(ADDRESS_PREFIX)


def is_literal(operand: str) -> bool:
    """Return True if operand is a plain decimal integer."""
    return LITERAL_PATTERN.fullmatch(operand) is not None


def label_key(name: str) -> str:
    """Wrap a bare name in label delimiters: 'LOOP' -> '(LOOP)'."""
    return f"{LABEL_OPEN}{name}{LABEL_CLOSE}"


# =============================================================================
# Pass 1: Label Resolution
# =============================================================================

def resolve_labels(lines: Iterable[Line]) -> Mapping[str, int]:
    """
    Build the label table.

    Args:
        lines: Cleaned source lines in order

    Returns:
        Read-only mapping of declaration text (e.g. "(LOOP)") to the
        zero-based index of the next instruction
    """
    table: dict[str, int] = {}
    index = 0

    for line in lines:
        text = line_text(line)
        if not text:
            continue
        if not is_label_line(text):
            index += 1
        elif text not in table:
            table[text] = index

    logger.debug(f"Resolved {len(table)} labels over {index} instructions")
    return MappingProxyType(table)


# =============================================================================
# Pass 2: Variable Allocation
# =============================================================================

def allocate_variables(
    lines: Iterable[Line],
    labels: Mapping[str, int],
    base: int = VARIABLE_BASE,
) -> Mapping[str, int]:
    """
    Build the variable table.

    Args:
        lines: Cleaned source lines in order
        labels: Label table from resolve_labels()
        base: First address to allocate

    Returns:
        Read-only mapping of variable name to its RAM address
    """
    table: dict[str, int] = {}
    address = base

    for line in lines:
        text = line_text(line)
        if not is_address_line(text):
            continue
        name = text[len(ADDRESS_PREFIX):]
        if (
            name
            and not is_literal(name)
            and label_key(name) not in labels
            and not is_predefined_symbol(name)
            and name not in table
        ):
            table[name] = address
            address += 1

    logger.debug(f"Allocated {len(table)} variables starting at {base}")
    return MappingProxyType(table)
