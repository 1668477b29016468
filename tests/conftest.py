import logging
from pathlib import Path

import pytest

from annotation_scan import ScanConfig


@pytest.fixture
def c_config():
    """C-style delimiters with the two usual labels, no extension filter."""
    return ScanConfig(
        labels=["TODO", "FIXME"],
        single_line_delim="//",
        multi_line_delim_start="/*",
        multi_line_delim_end="*/",
    )


@pytest.fixture
def write_tree():
    """Create files from a ``{relative_path: content}`` mapping under a root."""

    def _write(root: Path, files: dict) -> Path:
        for relative, content in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        return root

    return _write


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("annotation_scan")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
