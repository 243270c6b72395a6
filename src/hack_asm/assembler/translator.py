"""
Instruction Translator
======================

The third and final pass. Given the cleaned source together with the
label and variable tables from the first two passes, it emits one 16-bit
binary word per instruction line. Label declarations produce no output.

Address Operand Resolution
--------------------------
An ``@operand`` is resolved in a fixed priority order:

1. decimal literal -> the value itself
2. predefined symbol (R0-R15, SP, SCREEN, ...) -> its fixed word
3. label (``(operand)`` is in the label table) -> the label's index
4. variable -> the address assigned by the variable pass

A literal always wins over any table, and a name declared as a label is
never treated as a variable.

Compute Instruction Layout
--------------------------
``dest=comp;jump`` becomes ``111`` + a + cccccc + ddd + jjj. A missing
dest or jump part encodes as ``000``.
"""

import logging
from typing import Iterable, Mapping, Optional

from hack_asm.assembler.symbols import (
    Line,
    is_address_line,
    is_label_line,
    is_literal,
    label_key,
)
from hack_asm.assembler.preprocessor import SourceLine
from hack_asm.cpu import (
    ADDRESS_PREFIX,
    COMPUTE_PREFIX,
    DEST_SEPARATOR,
    JUMP_SEPARATOR,
    NO_DEST,
    NO_JUMP,
    SYMBOL_TABLE,
    WORD_BITS,
    lookup_comp,
    lookup_dest,
    lookup_jump,
)
from hack_asm.errors import (
    AssemblerError,
    AssemblySyntaxError,
    EncodingOverflowError,
    SourceLocation,
    UndefinedSymbolError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Word Encoding
# =============================================================================

def to_binary(value: int) -> str:
    """
    Encode a non-negative integer as a 16-character binary string.

    Raises:
        EncodingOverflowError: If the value needs more than 16 bits
    """
    digits = format(value, "b")
    if value < 0 or len(digits) > WORD_BITS:
        raise EncodingOverflowError(value, WORD_BITS)
    return digits.zfill(WORD_BITS)


def encode_address(
    operand: str,
    labels: Mapping[str, int],
    variables: Mapping[str, int],
) -> str:
    """
    Encode the operand of an A-instruction (without the leading '@').

    Raises:
        AssemblySyntaxError: If the operand is empty
        EncodingOverflowError: If a literal does not fit in 16 bits
        UndefinedSymbolError: If the operand is in no table
    """
    if not operand:
        raise AssemblySyntaxError(
            "missing operand after '@'",
            hint="write @value, @SYMBOL or @label",
        )

    if is_literal(operand):
        return to_binary(int(operand))

    if operand in SYMBOL_TABLE:
        return SYMBOL_TABLE[operand]

    key = label_key(operand)
    if key in labels:
        return to_binary(labels[key])

    if operand in variables:
        return to_binary(variables[operand])

    raise UndefinedSymbolError(operand)


def encode_compute(text: str) -> str:
    """
    Encode a C-instruction such as 'D=D+1;JGT'.

    Raises:
        UnknownMnemonicError: If the comp, dest or jump part is unknown
    """
    body, has_jump, jump_text = text.partition(JUMP_SEPARATOR)

    if DEST_SEPARATOR in body:
        dest_text, _, comp_text = body.partition(DEST_SEPARATOR)
        dest = lookup_dest(dest_text)
    else:
        comp_text = body
        dest = NO_DEST

    comp = lookup_comp(comp_text)
    jump = lookup_jump(jump_text) if has_jump else NO_JUMP

    return f"{COMPUTE_PREFIX}{comp.a_bit}{comp.bits}{dest}{jump}"


# =============================================================================
# Pass 3: Translation
# =============================================================================

def translate_line(
    text: str,
    labels: Mapping[str, int],
    variables: Mapping[str, int],
) -> Optional[str]:
    """
    Translate one trimmed line.

    Returns:
        The 16-bit word, or None for label declarations and blank lines
    """
    if not text or is_label_line(text):
        return None
    if is_address_line(text):
        return encode_address(text[len(ADDRESS_PREFIX):], labels, variables)
    return encode_compute(text)


def translate(
    lines: Iterable[Line],
    labels: Mapping[str, int],
    variables: Mapping[str, int],
    filename: str = "<input>",
) -> str:
    """
    Translate cleaned source lines into newline-separated binary words.

    Args:
        lines: Cleaned source lines in order
        labels: Label table from resolve_labels()
        variables: Variable table from allocate_variables()
        filename: Name used in error locations

    Returns:
        One 16-character word per instruction, joined by '\\n', with no
        trailing newline

    Raises:
        AssemblerError: On the first malformed line; nothing is returned
    """
    words = []

    for position, line in enumerate(lines, start=1):
        text = str(line).strip()
        try:
            word = translate_line(text, labels, variables)
        except AssemblerError as e:
            number = line.line_number if isinstance(line, SourceLine) else position
            raise e.with_location(SourceLocation(filename, number), text)
        if word is not None:
            words.append(word)

    logger.debug(f"Translated {len(words)} instructions")
    return "\n".join(words)
