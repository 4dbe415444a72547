import logging
from pathlib import Path

import pytest

from test262_harness import (
    Description,
    Entry,
    Flag,
    Harness,
    HarnessConfig,
    HarnessResult,
    MetadataMissingError,
    SchemaError,
    TraversalError,
)

VALID = (
    "// Copyright (C) 2020 Example. All rights reserved.\n"
    "// This code is governed by the BSD license found in the LICENSE file.\n"
    "/*---\n"
    "esid: sec-example\n"
    "description: a valid test\n"
    "flags: [onlyStrict]\n"
    "---*/\n"
    "assert(true);\n"
)


def test_end_to_end_mixed_corpus(write_file, tmp_path):
    write_file("a-valid.js", VALID)
    write_file("b-malformed.js", "/*---\nnegative:\n  type: SyntaxError\n---*/\n")
    write_file("c-helper_FIXTURE.js", "this is not even parsed")

    harness = Harness(tmp_path)
    assert len(harness) == 2

    results = list(harness)
    assert [r.path.name for r in results] == ["a-valid.js", "b-malformed.js"]

    ok, bad = results
    assert ok.ok
    entry = ok.unwrap()
    assert isinstance(entry, Entry)
    assert entry.source == VALID
    assert entry.desc.esid == "sec-example"
    assert entry.desc.flags == {Flag.only_strict}
    assert entry.license_text.endswith("LICENSE file.\n")

    assert not bad.ok
    assert bad.entry is None
    assert isinstance(bad.error, SchemaError)
    with pytest.raises(SchemaError):
        bad.unwrap()


def test_failures_do_not_stop_iteration(write_file, tmp_path):
    write_file("1.js", "no metadata here")
    write_file("2.js", VALID)
    results = list(Harness(tmp_path))
    assert isinstance(results[0].error, MetadataMissingError)
    assert results[0].error.path == tmp_path / "1.js"
    assert results[1].ok


def test_harness_is_single_pass(write_file, tmp_path):
    write_file("t.js", VALID)
    harness = Harness(tmp_path)
    assert len(list(harness)) == 1
    assert list(harness) == []
    assert len(list(Harness(tmp_path))) == 1


def test_files_are_read_lazily(write_file, tmp_path):
    first = write_file("1.js", VALID)
    second = write_file("2.js", VALID)
    harness = Harness(tmp_path)
    assert next(harness).ok
    second.unlink()
    result = next(harness)
    assert result.path == second
    assert not result.ok
    with pytest.raises(StopIteration):
        next(harness)
    assert harness.paths == (first, second)


def test_entries_raises_first_error(write_file, tmp_path):
    write_file("1.js", VALID)
    write_file("2.js", "nothing")
    write_file("3.js", VALID)
    gen = Harness(tmp_path).entries()
    assert next(gen).path.name == "1.js"
    with pytest.raises(MetadataMissingError):
        next(gen)


def test_traversal_error_aborts_construction(tmp_path):
    with pytest.raises(TraversalError):
        Harness(tmp_path / "missing")


def test_root_from_config(write_file, tmp_path):
    write_file("only.mjs", VALID)
    write_file("ignored.js", VALID)
    harness = Harness(config=HarnessConfig(root=tmp_path, extension=".mjs"))
    assert [r.unwrap().path.name for r in harness] == ["only.mjs"]


def test_root_from_environment(sample_root):
    harness = Harness()
    assert harness.root == sample_root
    entries = list(harness.entries())
    assert len(entries) == 3
    assert all(not e.path.stem.endswith("_FIXTURE") for e in entries)


def test_failures_are_logged(write_file, tmp_path, caplog):
    write_file("bad.js", "nothing")
    with caplog.at_level(logging.WARNING, logger="test262_harness.harness"):
        list(Harness(tmp_path))
    assert "bad.js" in caplog.text


def test_result_unwrap_success():
    entry = Entry(source="x", path=Path("x.js"), desc=Description())
    result = HarnessResult(path=entry.path, entry=entry)
    assert result.ok
    assert result.unwrap() is entry
