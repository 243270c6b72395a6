"""
Hack Instruction Set Definition
===============================

This module defines the encoding tables for the 16-bit Hack register
machine. Every instruction is exactly one 16-bit word, written out as a
string of sixteen '0'/'1' characters.

Instruction Formats
-------------------
1. **A-instruction** (address load): ``@value``
   - The value fills the word; for values up to 32767 bit 15 is 0
   - Example: ``@21`` -> ``0000000000010101``

2. **C-instruction** (compute): ``dest=comp;jump``
   - ``111 a cccccc ddd jjj``
   - ``a`` selects the A register (0) or memory M (1) as the second operand
   - ``cccccc`` is the ALU control pattern
   - ``ddd`` selects the destination registers
   - ``jjj`` selects the jump condition
   - Example: ``D=D+1;JGT`` -> ``111 0 011111 010 001``

Predefined Symbols
------------------
- ``R0``-``R15``: virtual registers at addresses 0-15
- ``SP``, ``LCL``, ``ARG``, ``THIS``, ``THAT``: pointers at addresses 0-4
  (``SP`` shares address 0 with ``R0``)
- ``SCREEN``: memory-mapped display at 0x4000
- ``KBD``: memory-mapped keyboard at 0x6000

The comp table is fixed data and must stay exactly as listed,
including mnemonics that share a pattern (``!A`` and ``-A``). Changing any
entry changes the output for valid programs.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from hack_asm.errors import UnknownMnemonicError


# =============================================================================
# Word Layout Constants
# =============================================================================

WORD_BITS = 16                 # Width of every instruction word
VARIABLE_BASE = 16             # First RAM address handed out to user variables
COMPUTE_PREFIX = "111"         # Instruction class bits of a C-instruction
NO_DEST = "000"
NO_JUMP = "000"

LABEL_OPEN = "("
LABEL_CLOSE = ")"
ADDRESS_PREFIX = "@"
DEST_SEPARATOR = "="
JUMP_SEPARATOR = ";"


# =============================================================================
# Compute Field Encoding
# =============================================================================

@dataclass(frozen=True)
class CompEncoding:
    """
    Encoding of one comp mnemonic.

    Attributes:
        a_bit: Operand source select ("0" = A register, "1" = memory M)
        bits: 6-bit ALU control pattern
    """
    a_bit: str
    bits: str

    def __str__(self) -> str:
        return self.a_bit + self.bits


def _comp(a_bit: int, bits: str) -> CompEncoding:
    return CompEncoding(str(a_bit), bits)


COMP_TABLE: Mapping[str, CompEncoding] = MappingProxyType({
    "0":   _comp(0, "101010"),
    "1":   _comp(0, "111111"),
    "-1":  _comp(0, "111010"),
    "D":   _comp(0, "001100"),
    "A":   _comp(0, "110000"),
    "M":   _comp(1, "110000"),
    "!D":  _comp(0, "001101"),
    "!A":  _comp(0, "110011"),
    "!M":  _comp(1, "110001"),
    "-D":  _comp(0, "001111"),
    "-A":  _comp(0, "110011"),
    "-M":  _comp(1, "110011"),
    "D+1": _comp(0, "011111"),
    "A+1": _comp(0, "110111"),
    "M+1": _comp(1, "110111"),
    "D-1": _comp(0, "001110"),
    "A-1": _comp(0, "110010"),
    "M-1": _comp(1, "110010"),
    "D+A": _comp(0, "000010"),
    "D+M": _comp(1, "000010"),
    "D-A": _comp(0, "010011"),
    "D-M": _comp(1, "010011"),
    "A-D": _comp(0, "000111"),
    "M-D": _comp(1, "000111"),
    "D&A": _comp(0, "000000"),
    "D&M": _comp(1, "000000"),
    "D|A": _comp(0, "010101"),
    "D|M": _comp(1, "010101"),
})


# =============================================================================
# Destination and Jump Field Encoding
# =============================================================================

DEST_TABLE: Mapping[str, str] = MappingProxyType({
    "null": "000",
    "M":    "001",
    "D":    "010",
    "MD":   "011",
    "A":    "100",
    "AM":   "101",
    "AD":   "110",
    "AMD":  "111",
})

JUMP_TABLE: Mapping[str, str] = MappingProxyType({
    "null": "000",
    "JGT":  "001",
    "JEQ":  "010",
    "JGE":  "011",
    "JLT":  "100",
    "JNE":  "101",
    "JLE":  "110",
    "JMP":  "111",
})


# =============================================================================
# Predefined Symbols
# =============================================================================

def _word(value: int) -> str:
    return format(value, f"0{WORD_BITS}b")


SYMBOL_TABLE: Mapping[str, str] = MappingProxyType({
    **{f"R{n}": _word(n) for n in range(16)},
    "KBD":    "0110000000000000",
    "SCREEN": "0100000000000000",
    # SP aliases R0
    "SP":     "0000000000000000",
    "LCL":    "0000000000000001",
    "ARG":    "0000000000000010",
    "THIS":   "0000000000000011",
    "THAT":   "0000000000000100",
})


# =============================================================================
# Lookup Functions
# =============================================================================

def lookup_comp(mnemonic: str) -> CompEncoding:
    """
    Look up a comp mnemonic.

    Raises:
        UnknownMnemonicError: If the mnemonic is not in COMP_TABLE
    """
    try:
        return COMP_TABLE[mnemonic]
    except KeyError:
        raise UnknownMnemonicError("comp", mnemonic, list(COMP_TABLE)) from None


def lookup_dest(mnemonic: str) -> str:
    """
    Look up a dest mnemonic.

    Raises:
        UnknownMnemonicError: If the mnemonic is not in DEST_TABLE
    """
    try:
        return DEST_TABLE[mnemonic]
    except KeyError:
        raise UnknownMnemonicError("dest", mnemonic, list(DEST_TABLE)) from None


def lookup_jump(mnemonic: str) -> str:
    """
    Look up a jump mnemonic.

    Raises:
        UnknownMnemonicError: If the mnemonic is not in JUMP_TABLE
    """
    try:
        return JUMP_TABLE[mnemonic]
    except KeyError:
        raise UnknownMnemonicError("jump", mnemonic, list(JUMP_TABLE)) from None


def is_predefined_symbol(name: str) -> bool:
    """Return True if name is one of the built-in register/IO symbols."""
    return name in SYMBOL_TABLE
