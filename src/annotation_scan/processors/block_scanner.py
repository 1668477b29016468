"""Split source files into comment-like candidate blocks.

The scanner is a two-state machine (idle / collecting) driven one line at a
time. It only looks for delimiter strings; it has no notion of string
literals or any other language syntax.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List

from ..exceptions import FileReadError
from ..models import CandidateBlock, ScanConfig


@dataclass
class BlockScanner:
    """Emit single-line comments and delimited multi-line runs."""

    single_line_delim: str
    multi_line_delim_start: str
    multi_line_delim_end: str
    encoding: str = "utf-8"
    errors: str = "replace"

    @classmethod
    def from_config(cls, config: ScanConfig, encoding: str = "utf-8", errors: str = "replace") -> "BlockScanner":
        return cls(
            single_line_delim=config.single_line_delim,
            multi_line_delim_start=config.multi_line_delim_start,
            multi_line_delim_end=config.multi_line_delim_end,
            encoding=encoding,
            errors=errors,
        )

    def scan_lines(self, lines: Iterable[str]) -> Iterator[CandidateBlock]:
        """Yield candidate blocks from an iterable of lines.

        The trailing "\\n" and one "\\r" before it are stripped. A block still open
        when the input ends is dropped without producing anything.
        """
        collecting = False
        pending: List[str] = []

        for line_number, raw in enumerate(lines, start=1):
            # Split on "\n" only; a CRLF ending leaves one "\r" to drop.
            line = raw.rstrip("\n").removesuffix("\r")

            if collecting:
                pending.append(line)
                if self.multi_line_delim_end in line:
                    yield CandidateBlock("\n".join(pending), line_number)
                    pending = []
                    collecting = False
                continue

            if self.single_line_delim in line:
                yield CandidateBlock(line, line_number)
            elif self.multi_line_delim_start in line:
                # Only a later line can close the block, even if this one
                # also holds the end delimiter.
                pending.append(line)
                collecting = True

    def scan_file(self, file_path: str) -> Iterator[CandidateBlock]:
        """Yield candidate blocks from the file at ``file_path``.

        The file stays open only while the generator is being consumed.

        Raises:
            FileReadError: If the file cannot be opened, read or decoded
        """
        try:
            with open(file_path, "r", encoding=self.encoding, errors=self.errors, newline="\n") as handle:
                yield from self.scan_lines(handle)
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadError(
                f"Error reading file {file_path}: {e}",
                details={"path": file_path},
            ) from e
