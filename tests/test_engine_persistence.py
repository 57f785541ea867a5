"""Tests for plain-text hypergraph persistence."""

import pytest

from hyperbuild.engine.core import Hypergraph
from hyperbuild.engine.persistence import (
    load_edgelist,
    load_hypergraph,
    parse_edgelist,
    save_hypergraph,
)


class TestSaveHypergraph:
    """Tests for save_hypergraph."""

    def test_writes_all_five_files(self, tmp_path, labelled_hypergraph):
        prefix = tmp_path / "out" / "credit"
        written = save_hypergraph(labelled_hypergraph, prefix)
        assert sorted(p.name for p in written) == [
            "credit.clusters",
            "credit.edgelist",
            "credit.edges",
            "credit.gt",
            "credit.vertices",
        ]
        assert (tmp_path / "out" / "credit.edgelist").read_text() == "1 2 3\n2 3\n"
        assert (tmp_path / "out" / "credit.vertices").read_text() == "a\nb\nc\n"
        assert (tmp_path / "out" / "credit.edges").read_text() == "first\nsecond\n"
        assert (tmp_path / "out" / "credit.gt").read_text() == "1\n2\n0\n"
        assert (tmp_path / "out" / "credit.clusters").read_text() == "red\nblue\n"

    def test_optional_files_skipped(self, tmp_path):
        hg = Hypergraph(edges=[(1, 2)], vertex_labels=["x", "y"])
        written = save_hypergraph(hg, tmp_path / "g")
        assert sorted(p.name for p in written) == ["g.edgelist", "g.vertices"]
        assert not (tmp_path / "g.gt").exists()

    def test_roundtrip(self, tmp_path, labelled_hypergraph):
        save_hypergraph(labelled_hypergraph, tmp_path / "g")
        assert load_hypergraph(tmp_path / "g") == labelled_hypergraph

    def test_null_byte_rejected(self, tmp_path):
        with pytest.raises(ValueError, match="null bytes"):
            save_hypergraph(Hypergraph(), str(tmp_path / "bad\x00name"))

    def test_directory_prefix_rejected(self, tmp_path):
        with pytest.raises(ValueError, match="directory"):
            save_hypergraph(Hypergraph(), tmp_path)


class TestLoadEdgelist:
    """Tests for reading edgelists."""

    def test_skips_blank_and_comment_lines(self):
        lines = ["# header", "1 2", "", "  3 4 5  ", "#"]
        assert parse_edgelist(lines) == [(1, 2), (3, 4, 5)]

    def test_bad_token_raises(self):
        with pytest.raises(ValueError, match="Line 2"):
            parse_edgelist(["1 2", "1 x"])

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "g.edgelist"
        path.write_text("1 10\n1 11\n")
        assert load_edgelist(path) == [(1, 10), (1, 11)]

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_edgelist(tmp_path / "absent.edgelist")

    def test_missing_prefix_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_hypergraph(tmp_path / "absent")
