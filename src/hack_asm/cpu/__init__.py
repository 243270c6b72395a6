"""
hackasm CPU Package
===================

Architecture definitions for the Hack machine: instruction word layout,
predefined symbols and the comp/dest/jump encoding tables.

Modules:
    hack: Encoding tables and lookup helpers.

Usage:
    from hack_asm.cpu import (
        COMP_TABLE,
        SYMBOL_TABLE,
        lookup_comp,
    )
"""

from hack_asm.cpu.hack import (
    # Word layout
    WORD_BITS,
    VARIABLE_BASE,
    COMPUTE_PREFIX,
    NO_DEST,
    NO_JUMP,
    LABEL_OPEN,
    LABEL_CLOSE,
    ADDRESS_PREFIX,
    DEST_SEPARATOR,
    JUMP_SEPARATOR,
    # Tables
    CompEncoding,
    COMP_TABLE,
    DEST_TABLE,
    JUMP_TABLE,
    SYMBOL_TABLE,
    # Lookup functions
    lookup_comp,
    lookup_dest,
    lookup_jump,
    is_predefined_symbol,
)

__all__ = [
    "WORD_BITS",
    "VARIABLE_BASE",
    "COMPUTE_PREFIX",
    "NO_DEST",
    "NO_JUMP",
    "LABEL_OPEN",
    "LABEL_CLOSE",
    "ADDRESS_PREFIX",
    "DEST_SEPARATOR",
    "JUMP_SEPARATOR",
    "CompEncoding",
    "COMP_TABLE",
    "DEST_TABLE",
    "JUMP_TABLE",
    "SYMBOL_TABLE",
    "lookup_comp",
    "lookup_dest",
    "lookup_jump",
    "is_predefined_symbol",
]
