"""Order and render annotation results.

Text output groups results under their file and label, indented with tabs:

    ./main.go
        FIXME
            12: handle the error
        TODO
            3: split this up
"""
from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List

from .models import AnnotationResult


def sort_results(results: Iterable[AnnotationResult]) -> List[AnnotationResult]:
    """Sort by filename length, filename, label, then line number."""
    return sorted(results, key=lambda result: result.sort_key)


def render_text(results: Iterable[AnnotationResult]) -> str:
    lines: List[str] = []
    current_file = None
    current_label = None
    for result in sort_results(results):
        if result.filename != current_file:
            current_file = result.filename
            current_label = None
            lines.append(current_file)
        if result.label != current_label:
            current_label = result.label
            lines.append(f"\t{current_label}")
        lines.append(f"\t\t{result.line_number}: {result.body}")
    return "".join(f"{line}\n" for line in lines)


def render_json(results: Iterable[AnnotationResult]) -> str:
    """Render ``{filename: {label: [{"line": n, "body": text}]}}`` in report order."""
    grouped: Dict[str, Dict[str, List[Dict[str, Any]]]] = {}
    for result in sort_results(results):
        by_label = grouped.setdefault(result.filename, {})
        by_label.setdefault(result.label, []).append(
            {"line": result.line_number, "body": result.body}
        )
    return json.dumps(grouped, indent=2) + "\n"


RENDERERS = {
    "text": render_text,
    "json": render_json,
}
