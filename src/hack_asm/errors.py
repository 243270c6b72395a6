"""
hackasm Error Hierarchy
=======================

This module defines the exception hierarchy for the assembler. All
exceptions inherit from HackError, allowing callers to catch every
assembler-related error with a single except clause if desired.

Exception Hierarchy
-------------------
HackError (base)
└── AssemblerError (assembler-related)
    ├── AssemblySyntaxError - malformed source line
    ├── EncodingOverflowError - value does not fit in a 16-bit word
    ├── UnknownMnemonicError - comp/dest/jump mnemonic not in its table
    └── UndefinedSymbolError - operand not found in any symbol table

Every error is fatal: the assembler never emits partial output.

Error messages follow this format:
    filename:line: error: description
        source_line_text
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class HackError(Exception):
    """
    Base exception for all hackasm errors.

        try:
            assembler.assemble_file("Prog.asm")
        except HackError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed) in the original, uncleaned source
    """
    filename: str
    line: int

    def __str__(self) -> str:
        """Format as 'filename:line' for error messages."""
        return f"{self.filename}:{self.line}"


# =============================================================================
# Assembler Exceptions
# =============================================================================

class AssemblerError(HackError):
    """
    Base exception for all assembler-related errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The actual source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            Prog.asm:12: error: unknown comp mnemonic 'D+2'
                D=D+2
            hint: valid comp mnemonics are 0, 1, -1, D, A, ...
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None:
            parts.append(f"    {self.source_line}")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)

    def with_location(
        self, location: SourceLocation, source_line: str
    ) -> "AssemblerError":
        """
        Attach a source location to an error raised without one.

        The encoding helpers work on bare strings and know nothing about
        files or line numbers; the translator calls this on the way out so
        the final message points at the offending line.
        """
        if self.location is None:
            self.location = location
            self.source_line = source_line
            self.args = (self._format_message(),)
        return self


class AssemblySyntaxError(AssemblerError):
    """
    Syntax error in assembly source code.

    Examples:
        - Address instruction with no operand ("@")
    """
    pass


class EncodingOverflowError(AssemblerError):
    """
    A value does not fit in the 16-bit instruction word.

    Raised when the base-2 representation of an address or literal is
    wider than 16 digits. Values are never truncated or wrapped.
    """

    def __init__(
        self,
        value: int,
        width: int = 16,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.value = value
        self.width = width
        super().__init__(
            f"value {value} is too large for a {width}-bit word",
            location=location,
            hint=f"largest encodable value is {(1 << width) - 1}",
            source_line=source_line,
        )


class UnknownMnemonicError(AssemblerError, LookupError):
    """
    A comp, dest or jump field is not a known mnemonic.

    Also a LookupError, so callers treating the encoding tables as plain
    lookups can catch it that way.
    """

    def __init__(
        self,
        field: str,
        mnemonic: str,
        valid: Optional[list[str]] = None,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.field = field
        self.mnemonic = mnemonic
        self.valid = valid or []

        hint = None
        if self.valid:
            hint = f"valid {field} mnemonics are {', '.join(self.valid)}"

        super().__init__(
            f"unknown {field} mnemonic '{mnemonic}'",
            location=location,
            hint=hint,
            source_line=source_line,
        )


class UndefinedSymbolError(AssemblerError):
    """
    Reference to a symbol missing from every table.

    The variable pass allocates every unresolved name, so this only
    happens when the translator is handed a variable table that was not
    built from the same source.
    """

    def __init__(
        self,
        symbol: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.symbol = symbol
        super().__init__(
            f"undefined symbol '{symbol}'",
            location=location,
            source_line=source_line,
        )
