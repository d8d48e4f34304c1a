"""
Hack Assembler - Main Interface
===============================

This module provides the main Assembler class, which is the primary
interface for assembling Hack source code. It coordinates the parser and
the code generator and owns the output files.

Example Usage
-------------
>>> from hack_asm.assembler import Assembler
>>>
>>> asm = Assembler()
>>> asm.assemble_string('''
... @2
... D=A
... @3
... D=D+A
... @0
... M=D
... ''')
>>> asm.get_code()[1]
'1110110000010000'
>>> asm.write_hack("Add.hack")

Command-Line Usage
------------------
    $ hackasm Add.asm            # writes Add.hack
    $ hackasm Add.asm -s Add.sym -l Add.lst
"""

from pathlib import Path
from typing import Iterable, Optional
import logging

from hack_asm.assembler.parser import parse_source
from hack_asm.assembler.codegen import CodeGenerator
from hack_asm.config import AssemblerConfig

logger = logging.getLogger(__name__)


class Assembler:
    """
    Main Hack assembler class.

    Assembly either succeeds completely or raises; a failed run leaves no
    generated code behind, so write_hack() never produces partial output.

    Attributes:
        config: Assembly settings (variable base, range check, output suffix)
    """

    def __init__(self, config: Optional[AssemblerConfig] = None):
        """
        Initialize the assembler.

        Args:
            config: Assembly settings (defaults to AssemblerConfig())
        """
        self.config = config or AssemblerConfig()
        self._codegen = CodeGenerator(self.config)
        self._source_file: Optional[Path] = None
        self._assembled = False

    # =========================================================================
    # Assembly Methods
    # =========================================================================

    def assemble_lines(self, lines: Iterable[str], filename: str = "<input>") -> list[str]:
        """
        Assemble source read from any line source.

        Args:
            lines: Iterable of source lines (an open file works)
            filename: Name used in error messages

        Returns:
            Encoded 16-character words in program order

        Raises:
            AssemblerError: If assembly fails
        """
        self._assembled = False
        statements = parse_source(lines, filename)
        logger.debug(f"Parsed {len(statements)} statements from {filename}")

        words = self._codegen.generate(statements)
        self._assembled = True

        logger.info(
            f"Assembled {filename}: {len(words)} instructions, "
            f"{len(self._codegen.get_variable_addresses())} variables"
        )
        return words

    def assemble_string(self, source: str, filename: str = "<input>") -> list[str]:
        """
        Assemble source code from a string.

        Args:
            source: Assembly source code
            filename: Virtual filename for error messages

        Returns:
            Encoded 16-character words in program order
        """
        return self.assemble_lines(source.splitlines(), filename)

    def assemble_file(self, filepath: str | Path) -> list[str]:
        """
        Assemble source code from a file.

        Args:
            filepath: Path to assembly source file

        Returns:
            Encoded 16-character words in program order

        Raises:
            AssemblerError: If assembly fails
            FileNotFoundError: If source file not found
        """
        filepath = Path(filepath)
        self._source_file = filepath
        logger.debug(f"Assembling {filepath}")

        with open(filepath) as f:
            return self.assemble_lines(f, str(filepath))

    # =========================================================================
    # Results
    # =========================================================================

    def get_code(self) -> list[str]:
        """Return the encoded words of the last successful assembly."""
        return self._codegen.get_words()

    def get_symbols(self) -> dict[str, int]:
        """Return the symbol table (predefined, labels, and variables)."""
        return self._codegen.get_symbols()

    def get_symbol_table(self):
        """Return the SymbolTable object of the last run."""
        return self._codegen.symbols

    def get_instruction_count(self) -> int:
        """Return the number of real instructions in the last run."""
        return self._codegen.get_instruction_count()

    def get_listing(self) -> str:
        """Return the assembly listing of the last run."""
        return self._codegen.get_listing()

    def default_output_path(self, source: str | Path | None = None) -> Path:
        """
        Derive the machine-code path from a source path.

        The suffix is replaced by the configured output suffix, in the
        same directory as the source.
        """
        source = Path(source) if source is not None else self._source_file
        if source is None:
            raise ValueError("no source file to derive an output path from")
        return source.with_suffix(self.config.output_suffix)

    # =========================================================================
    # Output Methods
    # =========================================================================

    def _require_assembled(self) -> None:
        if not self._assembled:
            raise RuntimeError("nothing has been assembled successfully")

    def write_hack(self, filepath: str | Path | None = None) -> Path:
        """
        Write the machine words, one per line.

        Args:
            filepath: Output path (default: derived from the source file)

        Returns:
            The path written
        """
        self._require_assembled()
        path = Path(filepath) if filepath is not None else self.default_output_path()
        self._codegen.write_hack(path)
        logger.debug(f"Wrote {path}")
        return path

    def write_listing(self, filepath: str | Path) -> None:
        """Write the assembly listing file."""
        self._require_assembled()
        self._codegen.write_listing(filepath)
        logger.debug(f"Wrote listing to {filepath}")

    def write_symbols(self, filepath: str | Path) -> None:
        """Write the symbol table file."""
        self._require_assembled()
        self._codegen.write_symbols(filepath)
        logger.debug(f"Wrote symbols to {filepath}")


# =============================================================================
# Convenience Functions
# =============================================================================

def assemble(source: str, filename: str = "<input>") -> list[str]:
    """
    Convenience function to assemble source code.

    Raises:
        AssemblerError: If assembly fails
    """
    return Assembler().assemble_string(source, filename)


def assemble_file(filepath: str | Path) -> list[str]:
    """
    Convenience function to assemble a file.

    Raises:
        AssemblerError: If assembly fails
    """
    return Assembler().assemble_file(filepath)
