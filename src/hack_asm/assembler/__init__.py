"""
Hack Assembler
==============

This package translates Hack assembly source into 16-bit binary machine
code, one word per instruction, written as text.

Main Components
---------------
- **Assembler**: Main class that orchestrates the assembly process
- **preprocess**: Strips comments and blank lines from raw source
- **resolve_labels**: Pass 1, maps label declarations to instruction indices
- **allocate_variables**: Pass 2, assigns RAM addresses to user variables
- **translate**: Pass 3, encodes every instruction line

Assembly Process
----------------
1. **Preprocessing**: remove ``//`` comments, trim lines, drop empty lines
2. **Labels**: count instructions, record ``(NAME)`` -> next instruction index
3. **Variables**: give each new ``@name`` an address from 16 upwards
4. **Translation**: encode A- and C-instructions, skip label declarations

Each pass reads the complete output of the one before it and returns a new
read-only table; no state survives between runs.

Example Usage
-------------
>>> from hack_asm.assembler import assemble
>>> assemble("(LOOP)\\n@LOOP\\n0;JMP")
'0000000000000000\\n1110101010000111'
"""

from hack_asm.assembler.assembler import Assembler, assemble, assemble_file
from hack_asm.assembler.config import AssemblerConfig
from hack_asm.assembler.preprocessor import SourceLine, preprocess, strip_comment
from hack_asm.assembler.symbols import (
    allocate_variables,
    is_literal,
    label_key,
    resolve_labels,
)
from hack_asm.assembler.translator import (
    encode_address,
    encode_compute,
    to_binary,
    translate,
    translate_line,
)

__all__ = [
    # Main class and functions
    "Assembler",
    "AssemblerConfig",
    "assemble",
    "assemble_file",
    # Preprocessor
    "SourceLine",
    "preprocess",
    "strip_comment",
    # Symbol passes
    "resolve_labels",
    "allocate_variables",
    "is_literal",
    "label_key",
    # Translator
    "translate",
    "translate_line",
    "encode_address",
    "encode_compute",
    "to_binary",
]
