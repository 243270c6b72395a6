"""
hackasm - Hack Assembler Command-Line Interface
================================================

Usage Examples
--------------
Basic assembly (writes Prog.asm.hack next to the source):
    $ hackasm Prog.asm

With output file:
    $ hackasm Prog.asm -o Prog.hack

Also write the symbol table:
    $ hackasm Prog.asm -s Prog.sym

Verbose mode:
    $ hackasm -v Prog.asm
"""

import logging
from pathlib import Path
from typing import Optional

import click

from hack_asm import __version__
from hack_asm.assembler import Assembler, AssemblerConfig
from hack_asm.cli.errors import handle_cli_exception


def _require_parent_dir(path: Path) -> None:
    """Fail before anything is written if path cannot be created."""
    if not path.parent.is_dir():
        raise FileNotFoundError(f"No such directory: '{path.parent}'")


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: INPUT_FILE.hack)",
)
@click.option(
    "-s", "--symbols",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write label and variable addresses to this file",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="hackasm")
def main(
    input_file: Path,
    output: Optional[Path],
    symbols: Optional[Path],
    verbose: bool,
) -> None:
    """
    Assemble Hack assembly source into binary machine code.

    INPUT_FILE is the assembly source file (.asm) to assemble.

    \b
    Examples:
        hackasm Prog.asm              # Outputs Prog.asm.hack
        hackasm Prog.asm -o out.hack  # Specify output file
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    asm = Assembler(AssemblerConfig(verbose=verbose))
    output_file = output if output is not None else asm.default_output_path(input_file)

    try:
        if verbose:
            click.echo(f"Assembling {input_file}...")

        asm.assemble_file(input_file)

        # Both outputs are checked before either is written
        _require_parent_dir(output_file)
        if symbols:
            _require_parent_dir(symbols)

        asm.write_hack(output_file)

        if symbols:
            asm.write_symbols(symbols)
            if verbose:
                click.echo(f"Wrote symbols to {symbols}")

        if verbose:
            click.echo(f"Wrote {asm.instruction_count()} instructions to {output_file}")
            click.echo(
                f"Defined {len(asm.get_labels())} labels, "
                f"{len(asm.get_variables())} variables"
            )

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Assembly")


if __name__ == "__main__":
    main()
