"""Label extraction from candidate comment blocks."""

from .label_extractor import LabelExtractor, compile_label

__all__ = ["LabelExtractor", "compile_label"]
