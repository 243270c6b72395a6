"""
Shared fixtures for the hackasm test suite.

Provides a small reference program (Max: R2 = max(R0, R1)) and its
expected binary translation.
"""

import pytest


MAX_SOURCE = """\
// Computes R2 = max(R0, R1)
   @R0
   D=M              // D = first number
   @R1
   D=D-M            // D = first number - second number
   @OUTPUT_FIRST
   D;JGT            // if D>0 (first is greater) goto output_first
   @R1
   D=M              // D = second number
   @OUTPUT_D
   0;JMP            // goto output_d
(OUTPUT_FIRST)
   @R0
   D=M              // D = first number
(OUTPUT_D)
   @R2
   M=D              // M[2] = D (greatest number)
(INFINITE_LOOP)
   @INFINITE_LOOP
   0;JMP            // infinite loop
"""

MAX_HACK = "\n".join([
    "0000000000000000",
    "1111110000010000",
    "0000000000000001",
    "1111010011010000",
    "0000000000001010",
    "1110001100000001",
    "0000000000000001",
    "1111110000010000",
    "0000000000001100",
    "1110101010000111",
    "0000000000000000",
    "1111110000010000",
    "0000000000000010",
    "1110001100001000",
    "0000000000001110",
    "1110101010000111",
])


@pytest.fixture
def max_source() -> str:
    """Fixture: Max.asm source text."""
    return MAX_SOURCE


@pytest.fixture
def max_hack() -> str:
    """Fixture: expected binary output for Max.asm."""
    return MAX_HACK
