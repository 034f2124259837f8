"""Line-oriented helpers shared across all CLI output parsers."""

from __future__ import annotations

import re

# IOS parser errors: "% Ambiguous command:", "% Invalid input detected", ...
_CLI_ERROR_RE: re.Pattern[str] = re.compile(
    r"^\s*%\s*(?:Ambiguous command|Invalid input|Incomplete command|Unrecognized command)",
    re.IGNORECASE,
)


def normalize_text(s: str) -> str:
    """Strip surrounding whitespace and collapse internal runs.

    Args:
        s: Raw text from a CLI output column.

    Returns:
        Cleaned string with single spaces between words.
    """
    return re.sub(r"\s+", " ", s).strip()


def output_lines(output: str) -> list[str]:
    """Split raw CLI output into lines, dropping carriage returns."""
    return [line.rstrip("\r") for line in re.split(r"\r?\n", output)]


def is_unprivileged_prompt(line: str) -> bool:
    """Return ``True`` if *line* ends with the user-mode prompt character ``>``."""
    return line.rstrip().endswith(">")


def find_cli_error(output: str) -> str | None:
    """Return the first ``%`` parser error line in *output*, or ``None``."""
    for line in output_lines(output):
        if _CLI_ERROR_RE.match(line):
            return line.strip()
    return None
