"""
Assembler Configuration
=======================

Options controlling a translation run. There are no environment variables
and nothing is persisted between runs; every value comes from the caller
(or the command line).
"""

from dataclasses import dataclass

from hack_asm.cpu import VARIABLE_BASE


@dataclass
class AssemblerConfig:
    """
    Assembler configuration options.

    Attributes:
        variable_base: First RAM address given to user variables (default: 16)
        output_suffix: Suffix appended to the source path to name the output
                       file (default: ".hack", so Prog.asm -> Prog.asm.hack)
        verbose: Log pass summaries at INFO level instead of DEBUG
    """
    variable_base: int = VARIABLE_BASE
    output_suffix: str = ".hack"
    verbose: bool = False

    def __post_init__(self):
        if self.variable_base < 0:
            raise ValueError(f"variable_base must be >= 0, got {self.variable_base}")
        if not self.output_suffix:
            raise ValueError("output_suffix must not be empty")
