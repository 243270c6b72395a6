"""
Source Preprocessor
===================

Turns raw assembly text into the cleaned line sequence the three passes
work on:

- ``//`` comments are removed up to the end of the line
- every line is trimmed of surrounding whitespace
- lines left empty are dropped

Each surviving line keeps the 1-based number it had in the original file
so later errors can point back at it.

Example:
    >>> preprocess("// add\\n@2\\nD=A  // load\\n\\n(END)")
    [SourceLine(text='@2', line_number=2), SourceLine(text='D=A', line_number=3),
     SourceLine(text='(END)', line_number=5)]
"""

import re
from dataclasses import dataclass

COMMENT_PATTERN = re.compile(r"//.*")


@dataclass(frozen=True)
class SourceLine:
    """
    One cleaned line of assembly source.

    Attributes:
        text: Trimmed line text with comments removed
        line_number: 1-based line number in the original source
    """
    text: str
    line_number: int

    def __str__(self) -> str:
        return self.text


def strip_comment(line: str) -> str:
    """Remove a trailing // comment and surrounding whitespace."""
    return COMMENT_PATTERN.sub("", line).strip()


def preprocess(source: str) -> list[SourceLine]:
    """
    Clean assembly source into a list of SourceLine.

    Accepts any of the common newline conventions (\\n, \\r\\n, \\r).

    Args:
        source: Raw assembly text

    Returns:
        Non-empty cleaned lines in source order
    """
    lines = []
    for number, raw in enumerate(source.splitlines(), start=1):
        text = strip_comment(raw)
        if text:
            lines.append(SourceLine(text, number))
    return lines
