"""
hackasm - Hack Assembler Command-Line Interface
===============================================

This module implements the command-line interface for the Hack assembler.

Usage Examples
--------------
Basic assembly (writes Prog.hack next to Prog.asm):
    $ hackasm Prog.asm

With output file:
    $ hackasm Prog.asm -o build/Prog.hack

Generate all output files:
    $ hackasm Prog.asm -s Prog.sym -l Prog.lst

Verbose mode:
    $ hackasm -v Prog.asm
"""

from pathlib import Path
from typing import Optional

import click

from hack_asm import __version__
from hack_asm.assembler import Assembler, SymbolKind
from hack_asm.cli.errors import handle_cli_exception, setup_logging
from hack_asm.config import AssemblerConfig


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
    help="Output file (default: input with its suffix replaced by .hack)",
)
@click.option(
    "-l", "--listing",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Generate listing file",
)
@click.option(
    "-s", "--symbols",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Generate symbol file",
)
@click.option(
    "--range-check/--no-range-check",
    default=None,
    help="Reject A-instruction addresses above 32767. Default: enabled "
         "(HACK_ASM_RANGE_CHECK overrides the default).",
)
@click.option(
    "--variable-base",
    type=click.IntRange(0, 32767),
    default=None,
    help="First RAM address allocated to variables. Default: 16.",
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
    listing: Optional[Path],
    symbols: Optional[Path],
    range_check: Optional[bool],
    variable_base: Optional[int],
    verbose: bool,
) -> None:
    """
    Assemble Hack assembly source into machine code.

    INPUT_FILE is the assembly source file (.asm) to assemble.

    The assembler writes one 16-character binary word per instruction.
    Nothing is written if assembly fails.

    \b
    Examples:
        hackasm Prog.asm              # Outputs Prog.hack
        hackasm Prog.asm -o out.hack  # Specify output file
        hackasm Prog.asm -s Prog.sym  # Also write the symbol table
    """
    setup_logging(verbose)

    # Environment first, then command-line overrides
    config = AssemblerConfig.from_env()
    if range_check is not None:
        config.range_check = range_check
    if variable_base is not None:
        config.variable_base = variable_base

    asm = Assembler(config)

    try:
        output_file = output if output is not None else asm.default_output_path(input_file)

        if verbose:
            click.echo(f"Assembling {input_file}...")

        words = asm.assemble_file(input_file)

        asm.write_hack(output_file)
        if verbose:
            click.echo(f"Wrote {len(words)} words to {output_file}")

        if listing:
            asm.write_listing(listing)
            if verbose:
                click.echo(f"Wrote listing to {listing}")

        if symbols:
            asm.write_symbols(symbols)
            if verbose:
                click.echo(f"Wrote symbols to {symbols}")

        if verbose:
            table = asm.get_symbol_table()
            labels = len(table.entries(SymbolKind.LABEL))
            variables = len(table.entries(SymbolKind.VARIABLE))
            click.echo(
                f"Assembly complete: {asm.get_instruction_count()} instructions, "
                f"{labels} labels, {variables} variables"
            )

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Assembly")


if __name__ == "__main__":
    main()
