"""
hackasm - Two-Pass Assembler for the Hack Computer
==================================================

This package translates symbolic Hack assembly (``.asm``) into the
textual binary format (``.hack``) loaded by Hack CPU emulators and
hardware simulators: one line of sixteen '0'/'1' characters per
instruction.

Main Components
---------------
- **assembler**: preprocessing, label/variable passes, translation
- **cpu**: instruction word layout and encoding tables
- **cli**: the ``hackasm`` command-line tool

Quick Start
-----------
    >>> from hack_asm import Assembler
    >>> asm = Assembler()
    >>> code = asm.assemble_file("Max.asm")
    >>> asm.write_hack("Max.hack")

Or from the command line:
    $ hackasm Max.asm
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from hack_asm.assembler import Assembler, AssemblerConfig, assemble, assemble_file
from hack_asm.errors import (
    HackError,
    AssemblerError,
    AssemblySyntaxError,
    EncodingOverflowError,
    UnknownMnemonicError,
    UndefinedSymbolError,
    SourceLocation,
)

__all__ = [
    "__version__",
    # Assembler
    "Assembler",
    "AssemblerConfig",
    "assemble",
    "assemble_file",
    # Exception hierarchy
    "HackError",
    "AssemblerError",
    "AssemblySyntaxError",
    "EncodingOverflowError",
    "UnknownMnemonicError",
    "UndefinedSymbolError",
    "SourceLocation",
]
