"""
hackdisasm - Hack Disassembler Command-Line Interface
=====================================================

This module implements the command-line interface for the Hack
disassembler. It reads a .hack file (one 16-character binary word per
line) and prints the equivalent assembly.

Usage Examples
--------------
Disassemble to stdout:
    $ hackdisasm Prog.hack

Show ROM addresses and words:
    $ hackdisasm Prog.hack --addresses

Use a symbol file written by hackasm -s:
    $ hackdisasm Prog.hack --symbols Prog.sym

Output to file:
    $ hackdisasm Prog.hack -o Prog.dis.asm

Copyright (c) 2026 hack-asm Contributors
"""

import sys
from pathlib import Path
from typing import Optional

import click

from hack_asm import __version__
from hack_asm.cli.errors import handle_cli_exception, setup_logging
from hack_asm.disassembler import HackDisassembler


def read_symbol_file(path: Path) -> dict[int, str]:
    """
    Read a symbol file written by hackasm.

    Only variables are used: label addresses live in ROM and would
    otherwise shadow RAM addresses with the same number.
    """
    symbols: dict[int, str] = {}
    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        parts = line.split()
        if len(parts) >= 3 and parts[2] == "variable":
            symbols.setdefault(int(parts[1]), parts[0])
    return symbols


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
    help="Output file (default: stdout)",
)
@click.option(
    "-a", "--addresses",
    is_flag=True,
    help="Prefix each line with its ROM address and machine word",
)
@click.option(
    "-s", "--symbols",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Symbol file from hackasm -s, used to name variables",
)
@click.option(
    "-c", "--count",
    type=int,
    default=None,
    help="Maximum number of instructions to disassemble (default: all)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="hackdisasm")
def main(
    input_file: Path,
    output: Optional[Path],
    addresses: bool,
    symbols: Optional[Path],
    count: Optional[int],
    verbose: bool,
) -> None:
    """
    Disassemble Hack machine code.

    INPUT_FILE is a .hack file with one 16-character binary word per line.
    """
    setup_logging(verbose)

    try:
        lines = input_file.read_text().splitlines()
    except OSError as e:
        click.echo(f"Error reading {input_file}: {e}", err=True)
        sys.exit(2)

    try:
        symbol_table = read_symbol_file(symbols) if symbols else None
        disasm = HackDisassembler(symbol_table)
        instructions = disasm.disassemble(lines, count=count)

        if verbose:
            click.echo(f"Input file: {input_file} ({len(instructions)} instructions)", err=True)

        if addresses:
            output_lines = [str(instr) for instr in instructions]
        else:
            output_lines = [instr.text for instr in instructions]
        text = "\n".join(output_lines) + "\n" if output_lines else ""

        if output:
            output.write_text(text)
            if verbose:
                click.echo(f"Wrote {output}", err=True)
        else:
            click.echo(text, nl=False)

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Disassembly")


if __name__ == "__main__":
    main()
