"""Data types shared by the annotation extraction pipeline.

``ScanConfig`` is the validated configuration consumed by every stage.
``CandidateBlock`` is the transient unit passed from the block scanner to the
label extractor, and ``AnnotationResult`` is the record handed to the report
renderer.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ScanConfig(BaseModel):
    """Labels and comment delimiters for one scan.

    The JSON form uses camelCase keys (``fileExtensions``,
    ``singleLineDelim`` ...); Python callers may use the field names.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    labels: Tuple[str, ...] = Field(
        default=("TODO", "FIXME"),
        description="Label tokens to look for, in report precedence order",
    )
    file_extensions: FrozenSet[str] = Field(
        default=frozenset(),
        alias="fileExtensions",
        description="Extensions to scan without the leading dot; empty scans every file",
    )
    single_line_delim: str = Field(
        default="//", alias="singleLineDelim", min_length=1,
        description="Marker of a single-line comment",
    )
    multi_line_delim_start: str = Field(
        default="/*", alias="multiLineDelimStart", min_length=1,
        description="Opening marker of a block comment",
    )
    multi_line_delim_end: str = Field(
        default="*/", alias="multiLineDelimEnd", min_length=1,
        description="Closing marker of a block comment",
    )

    @field_validator("labels")
    @classmethod
    def check_labels(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """Reject empty labels and drop repeats, keeping the first occurrence."""
        if any(not label for label in v):
            raise ValueError("labels must be non-empty strings")
        return tuple(dict.fromkeys(v))

    @field_validator("file_extensions")
    @classmethod
    def strip_leading_dots(cls, v: FrozenSet[str]) -> FrozenSet[str]:
        return frozenset(ext.lstrip(".") for ext in v)


@dataclass(frozen=True)
class CandidateBlock:
    """One or more source lines that may hold a comment.

    ``text`` joins the lines with ``\\n``; ``ending_line_number`` is the
    1-based number of the last line.
    """

    text: str
    ending_line_number: int

    @property
    def first_line_number(self) -> int:
        return self.ending_line_number - self.text.count("\n")


@dataclass(frozen=True)
class AnnotationResult:
    """A single label occurrence found in a source file."""

    label: str
    body: str
    filename: str
    line_number: int

    @property
    def sort_key(self) -> Tuple[int, str, str, int]:
        """Report ordering: shorter paths first, then path, label and line."""
        return (len(self.filename), self.filename, self.label, self.line_number)
