"""
Assembler Configuration
=======================

Settings shared by the assembler library and the command-line tools.
Configuration can come from:
- Default values (defined here)
- Environment variables (AssemblerConfig.from_env)
- Command-line options (applied by the CLI on top of the above)

Copyright (c) 2026 hack-asm Contributors
"""

from dataclasses import dataclass
from pathlib import Path
import os

from hack_asm.cpu import MAX_ADDRESS, VARIABLE_BASE


@dataclass
class AssemblerConfig:
    """
    Configuration for an assembly run.

    Attributes:
        variable_base: First RAM address handed out to variables (default: 16)
        output_suffix: Suffix of the machine-code file written next to the
                       source (default: ".hack")
        range_check: Reject address words above max_address (default: True)
        max_address: Largest address an A-instruction can load (default: 32767)
    """

    variable_base: int = VARIABLE_BASE
    output_suffix: str = ".hack"
    range_check: bool = True
    max_address: int = MAX_ADDRESS

    @classmethod
    def from_env(cls) -> "AssemblerConfig":
        """
        Create AssemblerConfig from environment variables.

        Environment variables (all optional):
            HACK_ASM_VARIABLE_BASE: First variable address (integer)
            HACK_ASM_OUTPUT_SUFFIX: Output file suffix (e.g. ".hack")
            HACK_ASM_RANGE_CHECK: "0"/"false"/"no" disables range checking

        Returns:
            AssemblerConfig with values from environment variables
        """
        config = cls()

        if base := os.environ.get("HACK_ASM_VARIABLE_BASE"):
            try:
                value = int(base)
            except ValueError:
                pass  # Ignore invalid values
            else:
                if 0 <= value <= config.max_address:
                    config.variable_base = value

        if suffix := os.environ.get("HACK_ASM_OUTPUT_SUFFIX"):
            if not suffix.startswith("."):
                suffix = f".{suffix}"
            try:
                valid = len(suffix) > 1 and Path("prog").with_suffix(suffix).name == f"prog{suffix}"
            except ValueError:
                valid = False  # "." or path separators
            if valid:
                config.output_suffix = suffix

        if range_check := os.environ.get("HACK_ASM_RANGE_CHECK"):
            config.range_check = range_check.strip().lower() not in ("0", "false", "no", "off")

        return config
