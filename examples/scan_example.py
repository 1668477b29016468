#!/usr/bin/env python3
"""
Example script demonstrating the annotation scanner.

This script shows how to:
1. Load a scan configuration
2. Scan a directory tree
3. Render the results as text and JSON
"""

import sys
from pathlib import Path

# Add src and the project root to path
sys.path.append(str(Path(__file__).parent.parent / "src"))
sys.path.append(str(Path(__file__).parent.parent))

from config import load_scan_config
from annotation_scan import AnnotationScanner, render_json, render_text


def scan_example(directory: str = "."):
    """Example of scanning a directory with the bundled configuration."""

    config_path = Path(__file__).parent / "config.json"

    # 1. Load the configuration
    print(f"1. Loading configuration from {config_path}")
    config = load_scan_config(config_path)
    print(f"Labels: {', '.join(config.labels)}")
    print(f"Extensions: {', '.join(sorted(config.file_extensions)) or 'all'}")

    # 2. Scan the tree
    print(f"\n2. Scanning {directory}...")
    scanner = AnnotationScanner(config)
    results = scanner.scan(directory)
    print(f"Scanned {scanner.files_scanned} files, skipped {scanner.files_skipped}")
    print(f"Found {len(results)} annotations")

    # 3. Render
    print("\n3. Text report:")
    print(render_text(results), end="")

    print("\n4. JSON report:")
    print(render_json(results), end="")


if __name__ == "__main__":
    scan_example(sys.argv[1] if len(sys.argv) > 1 else ".")
