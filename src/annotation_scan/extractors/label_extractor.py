"""Find configured labels inside candidate blocks.

A label captures only the rest of the physical line it starts on, even when
the block spans several lines:

    /* TODO first       -> "first"
       FIXME second     -> "second"
    */

The source line of a match is counted backwards from the block's last line
using the newlines that follow the match.
"""
from __future__ import annotations

import re
from typing import List, Pattern, Sequence, Tuple

from ..models import AnnotationResult, CandidateBlock, ScanConfig


def compile_label(label: str) -> Pattern[str]:
    """Literal ``label`` followed by the rest of its line (``.`` stops at ``\\n``)."""
    return re.compile(re.escape(label) + r"(.*)")


class LabelExtractor:
    """Turn candidate blocks into :class:`AnnotationResult` records."""

    def __init__(self, labels: Sequence[str], multi_line_delim_end: str):
        self.multi_line_delim_end = multi_line_delim_end
        self._matchers: List[Tuple[str, Pattern[str]]] = [
            (label, compile_label(label)) for label in labels
        ]

    @classmethod
    def from_config(cls, config: ScanConfig) -> "LabelExtractor":
        return cls(config.labels, config.multi_line_delim_end)

    @property
    def labels(self) -> List[str]:
        return [label for label, _ in self._matchers]

    def extract(self, block: CandidateBlock, filename: str) -> List[AnnotationResult]:
        """Return one result per label occurrence in ``block``.

        Labels are processed in configuration order; for each label the
        matches are non-overlapping and left to right. Matches of different
        labels may cover the same text.
        """
        results: List[AnnotationResult] = []
        text = block.text
        for label, matcher in self._matchers:
            for match in matcher.finditer(text):
                trailing = match.group(1)
                # Removal can splice a new delimiter together ("**//"), so repeat.
                while self.multi_line_delim_end and self.multi_line_delim_end in trailing:
                    trailing = trailing.replace(self.multi_line_delim_end, "")
                lines_after = text.count("\n", match.end())
                results.append(
                    AnnotationResult(
                        label=label,
                        body=trailing.strip(),
                        filename=filename,
                        line_number=block.ending_line_number - lines_after,
                    )
                )
        return results
