"""
Hack Assembler - Main Interface
===============================

This module provides the Assembler class, the primary interface for
turning Hack assembly source into binary machine code. It runs the
preprocessor and the three passes in order and handles file I/O.

Example Usage
-------------
>>> from hack_asm.assembler import Assembler
>>>
>>> asm = Assembler()
>>> print(asm.assemble_string('''
... // Computes R0 = 2 + 3
...     @2
...     D=A
...     @3
...     D=D+A
...     @R0
...     M=D
... '''))
0000000000000010
1110110000010000
0000000000000011
1110000010010000
0000000000000000
1110001100001000
>>> asm.write_hack("Add.hack")

Command-Line Usage
------------------
    $ hackasm Add.asm              # writes Add.asm.hack
    $ hackasm Add.asm -o Add.hack -s Add.sym
"""

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

from hack_asm.assembler.config import AssemblerConfig
from hack_asm.assembler.preprocessor import preprocess
from hack_asm.assembler.symbols import allocate_variables, resolve_labels
from hack_asm.assembler.translator import translate
from hack_asm.cpu import LABEL_CLOSE, LABEL_OPEN

logger = logging.getLogger(__name__)

_EMPTY: Mapping[str, int] = MappingProxyType({})


class Assembler:
    """
    Main Hack assembler class.

    Each call to assemble_string() or assemble_file() is an independent
    run: the label and variable tables are rebuilt from scratch, and the
    results of the previous run are replaced only if the new run succeeds.

    Attributes:
        config: Options for this assembler instance
    """

    def __init__(self, config: Optional[AssemblerConfig] = None):
        self.config = config or AssemblerConfig()
        self._output = ""
        self._instruction_count = 0
        self._labels: Mapping[str, int] = _EMPTY
        self._variables: Mapping[str, int] = _EMPTY

    def _log(self, message: str) -> None:
        level = logging.INFO if self.config.verbose else logging.DEBUG
        logger.log(level, message)

    # =========================================================================
    # Assembly Methods
    # =========================================================================

    def assemble_string(self, source: str, filename: str = "<input>") -> str:
        """
        Assemble source code from a string.

        The pipeline is:
        1. Preprocess (strip comments and blank lines)
        2. Resolve labels
        3. Allocate variables
        4. Translate instructions

        Args:
            source: Assembly source code
            filename: Virtual filename for error messages

        Returns:
            Newline-separated 16-bit binary words

        Raises:
            AssemblerError: If assembly fails
        """
        lines = preprocess(source)
        self._log(f"{filename}: {len(lines)} source lines after preprocessing")

        labels = resolve_labels(lines)
        variables = allocate_variables(lines, labels, base=self.config.variable_base)
        output = translate(lines, labels, variables, filename=filename)

        self._labels = labels
        self._variables = variables
        self._output = output
        self._instruction_count = len(output.splitlines())

        self._log(
            f"{filename}: {self._instruction_count} instructions, "
            f"{len(labels)} labels, {len(variables)} variables"
        )
        return output

    def assemble_file(self, filepath: str | Path) -> str:
        """
        Assemble source code from a file.

        Args:
            filepath: Path to assembly source file

        Returns:
            Newline-separated 16-bit binary words

        Raises:
            AssemblerError: If assembly fails
            FileNotFoundError: If source file not found
        """
        filepath = Path(filepath)
        self._log(f"Assembling {filepath}...")

        source = filepath.read_text()
        return self.assemble_string(source, str(filepath))

    # =========================================================================
    # Results
    # =========================================================================

    def get_output(self) -> str:
        """Return the binary output of the last successful run."""
        return self._output

    def get_labels(self) -> Mapping[str, int]:
        """Return the label table, keyed by declaration text, e.g. '(LOOP)'."""
        return self._labels

    def get_variables(self) -> Mapping[str, int]:
        """Return the variable table of the last run."""
        return self._variables

    def get_symbols(self) -> dict[str, int]:
        """
        Get the user symbol table.

        Returns:
            Labels (by bare name) and variables mapped to their values
        """
        symbols = {}
        for key, index in self._labels.items():
            # "(LOOP" never matches @LOOP, so it names nothing
            if not (key.startswith(LABEL_OPEN) and key.endswith(LABEL_CLOSE)):
                continue
            name = key[len(LABEL_OPEN):-len(LABEL_CLOSE)]
            if name:
                symbols[name] = index
        symbols.update(self._variables)
        return symbols

    def instruction_count(self) -> int:
        """Return the number of words emitted by the last run."""
        return self._instruction_count

    def default_output_path(self, source: str | Path) -> Path:
        """Return the output path for a source file: the suffix is appended."""
        return Path(f"{source}{self.config.output_suffix}")

    # =========================================================================
    # Output Methods
    # =========================================================================

    def write_hack(self, filepath: str | Path) -> None:
        """
        Write the binary output, one word per line.

        Args:
            filepath: Output file path
        """
        Path(filepath).write_text(self._output)
        self._log(f"Wrote {self._instruction_count} words to {filepath}")

    def write_symbols(self, filepath: str | Path) -> None:
        """
        Write the user symbol table.

        Format: name value (one per line, sorted by name)
        """
        with open(filepath, "w") as f:
            f.write("# Symbol table\n")
            f.write("# Generated by hackasm\n")
            for name, value in sorted(self.get_symbols().items()):
                f.write(f"{name} {value}\n")
        self._log(f"Wrote symbols to {filepath}")


# =============================================================================
# Convenience Functions
# =============================================================================

def assemble(source: str, filename: str = "<input>") -> str:
    """
    Convenience function to assemble source code.

    Raises:
        AssemblerError: If assembly fails
    """
    return Assembler().assemble_string(source, filename)


def assemble_file(filepath: str | Path) -> str:
    """
    Convenience function to assemble a file.

    Raises:
        AssemblerError: If assembly fails
        FileNotFoundError: If source file not found
    """
    return Assembler().assemble_file(filepath)
