"""
HTML -> Markdown conversion through the pandoc CLI.
"""

import asyncio
import logging
import os
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Optional, Protocol, Sequence

from errors import ConversionFailure, ConverterUnavailable

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

PANDOC_CMD = os.getenv("PANDOC_CMD", "pandoc")


class DocumentConverter(Protocol):
    async def convert(self, markup: str) -> str: ...


class PandocConverter:
    """
    Writes the markup to a temp file and runs
    `pandoc -f html -t markdown -o - <file>`, returning stdout.

    `command` is the argv prefix used to launch pandoc.
    """

    def __init__(
        self,
        command: Optional[Sequence[str]] = None,
        source_format: str = "html",
        target_format: str = "markdown",
    ):
        self.command = list(command) if command else [PANDOC_CMD]
        self.source_format = source_format
        self.target_format = target_format

    def _args(self, input_path: Path) -> list[str]:
        return [
            *self.command,
            "-f", self.source_format,
            "-t", self.target_format,
            "-o", "-",
            str(input_path),
        ]

    async def convert(self, markup: str) -> str:
        with tempfile.TemporaryDirectory(prefix="grindset-") as tmp:
            input_path = Path(tmp) / "question.html"
            input_path.write_text(markup, encoding="utf-8")

            try:
                proc = await asyncio.create_subprocess_exec(
                    *self._args(input_path),
                    stdin=asyncio.subprocess.DEVNULL,
                    stdout=asyncio.subprocess.PIPE,
                    stderr=asyncio.subprocess.PIPE,
                )
            except OSError as e:
                raise ConversionFailure(f"Could not start {self.command[0]}: {e}") from e
            stdout, stderr = await proc.communicate()

        if proc.returncode != 0:
            err = stderr.decode("utf-8", errors="replace")
            raise ConversionFailure(f"Pandoc error: {err}", stderr=err)

        try:
            return stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ConversionFailure(f"Pandoc output is not valid UTF-8: {e}") from e


def check_pandoc(command: str = PANDOC_CMD) -> str:
    """
    Verify pandoc can be run and return its version line.
    Raises ConverterUnavailable otherwise.
    """
    resolved = shutil.which(command)
    if not resolved:
        raise ConverterUnavailable(
            f"Pandoc not found: '{command}'. Install it or set PANDOC_CMD."
        )

    try:
        result = subprocess.run(
            [resolved, "--version"], capture_output=True, check=False
        )
    except OSError as e:
        raise ConverterUnavailable(f"Could not run {resolved}: {e}") from e

    if result.returncode != 0:
        raise ConverterUnavailable("Pandoc is not installed or not in PATH")

    lines = result.stdout.decode("utf-8", errors="replace").splitlines()
    version = lines[0] if lines else "Unknown"
    logger.info(f"Pandoc version: {version}")
    return version
