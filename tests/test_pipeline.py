import logging
import os
import typing

import pytest

from annotation_scan import (
    AnnotationResult,
    AnnotationScanner,
    DirectoryListingError,
    ScanConfig,
    render_text,
    scan,
)

MAIN_GO = """package main

// TODO handle flags
func main() {
	/* FIXME this block
	   spans lines
	   TODO and has two labels
	*/
	run() // not a label
}
"""

UTIL_GO = """package util

/* TODO unterminated block
func Helper() {}
"""


@pytest.fixture
def project(tmp_path, write_tree):
    return write_tree(tmp_path / "project", {
        "main.go": MAIN_GO,
        "pkg/util.go": UTIL_GO,
        "README.md": "// TODO not scanned because of the extension filter\n",
        "plain.go": "package plain\n",
    })


@pytest.fixture
def go_config(c_config):
    return c_config.model_copy(update={"file_extensions": frozenset({"go"})})


def test_scan_collects_results_from_the_tree(project, go_config):
    main_go = os.path.join(str(project), "main.go")
    results = scan(project, go_config)
    assert results == [
        AnnotationResult("FIXME", "this block", main_go, 5),
        AnnotationResult("TODO", "handle flags", main_go, 3),
        AnnotationResult("TODO", "and has two labels", main_go, 7),
    ]


def test_counters_track_scanned_files(project, go_config):
    scanner = AnnotationScanner(go_config)
    scanner.scan(project)
    assert scanner.files_scanned == 3
    assert scanner.files_skipped == 0


def test_files_without_delimiters_yield_nothing(project, go_config):
    scanner = AnnotationScanner(go_config)
    assert scanner.scan_file(os.path.join(str(project), "plain.go")) == []


def test_unterminated_block_contributes_nothing(project, go_config):
    scanner = AnnotationScanner(go_config)
    assert scanner.scan_file(os.path.join(str(project), "pkg", "util.go")) == []


def test_empty_extension_set_scans_every_file(project, c_config):
    results = scan(project, c_config)
    filenames = {result.filename for result in results}
    assert os.path.join(str(project), "README.md") in filenames


def test_unreadable_file_is_skipped_with_warning(project, go_config, caplog):
    broken = project / "broken.go"
    try:
        os.symlink(project / "does-not-exist.go", broken)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks not supported")

    scanner = AnnotationScanner(go_config)
    with caplog.at_level(logging.WARNING, logger="annotation_scan"):
        results = scanner.scan(project)

    assert scanner.files_skipped == 1
    assert scanner.files_scanned == 3
    assert len(results) == 3
    assert any(str(broken) in record.getMessage() for record in caplog.records)


def test_undecodable_file_skipped_in_strict_mode(project, go_config):
    (project / "latin.go").write_bytes(b"// TODO caf\xe9\n")
    scanner = AnnotationScanner(go_config, errors="strict")
    results = scanner.scan(project)
    assert scanner.files_skipped == 1
    assert all(not result.filename.endswith("latin.go") for result in results)


def test_missing_root_aborts_the_scan(tmp_path, go_config):
    with pytest.raises(DirectoryListingError):
        AnnotationScanner(go_config).scan(tmp_path / "nowhere")


def test_repeated_runs_render_identically(project, go_config):
    first = render_text(AnnotationScanner(go_config).scan(project))
    second = render_text(AnnotationScanner(go_config).scan(project))
    assert first == second


def test_output_independent_of_creation_order(tmp_path, write_tree, go_config, monkeypatch):
    files = {
        "z.go": "// TODO last file\n",
        "a.go": "// FIXME first file\n// TODO again\n",
        "dir/m.go": "/* TODO nested\n*/\n",
    }
    forward = write_tree(tmp_path / "forward", files)
    backward = write_tree(tmp_path / "backward", dict(reversed(list(files.items()))))

    monkeypatch.chdir(forward)
    forward_report = render_text(AnnotationScanner(go_config).scan("."))
    monkeypatch.chdir(backward)
    backward_report = render_text(AnnotationScanner(go_config).scan("."))

    assert forward_report == backward_report
    assert forward_report.splitlines()[0] == os.path.join(".", "a.go")


def test_custom_delimiters(tmp_path, write_tree):
    config = ScanConfig(
        labels=["XXX"],
        file_extensions=["py"],
        single_line_delim="#",
        multi_line_delim_start='"""',
        multi_line_delim_end='"""',
    )
    root = write_tree(tmp_path / "py", {
        "mod.py": 'def f():\n    """\n    XXX document me\n    """\n    return 1  # XXX magic\n',
    })
    results = scan(root, config)
    assert [(r.line_number, r.body) for r in results] == [(3, "document me"), (5, "magic")]


def test_block_opened_and_closed_on_one_line_keeps_collecting(tmp_path, write_tree, c_config):
    root = write_tree(tmp_path / "c", {
        "a.c": "/* note */\nint x; TODO hidden\n*/\n/* TODO dangling */\n",
    })
    results = scan(root, c_config)
    assert [(r.label, r.body, r.line_number) for r in results] == [("TODO", "hidden", 2)]


def test_lone_carriage_return_does_not_shift_lines(tmp_path, write_tree, c_config):
    root = write_tree(tmp_path / "cr", {"a.c": b"int a;\rint b;\n// TODO here\r\n"})
    (result,) = scan(root, c_config)
    assert (result.line_number, result.body) == (2, "here")


def test_scan_wrapper_is_annotated():
    hints = typing.get_type_hints(scan)
    assert hints["return"] == typing.List[AnnotationResult]
    assert hints["config"] is ScanConfig
