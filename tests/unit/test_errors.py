"""Tests for error handling paths."""

import pytest

from csgraph.core.database import decode_header, load_database, read_database
from csgraph.core.exceptions import CsgraphError, FormatError, TruncatedRecordError
from csgraph.core.graph import build_call_graph
from csgraph.core.graph.query import compute_callees, compute_callers


class TestHeaderErrors:
    """Tests for header validation."""

    def test_wrong_tag(self) -> None:
        with pytest.raises(FormatError) as exc_info:
            decode_header(b"ctags 15 /src 0000000100\n")

        assert "cscope database" in str(exc_info.value)

    def test_tag_must_match_exactly(self) -> None:
        with pytest.raises(FormatError):
            decode_header(b"cscopex 15 /src 0000000100\n")

    def test_non_numeric_version(self) -> None:
        with pytest.raises(FormatError) as exc_info:
            decode_header(b"cscope fifteen /src 0000000100\n")

        assert "version" in str(exc_info.value)

    def test_non_numeric_trailer(self) -> None:
        with pytest.raises(FormatError) as exc_info:
            decode_header(b"cscope 15 /src -c end\n")

        assert "trailer" in str(exc_info.value)

    def test_non_ascii_digit_version(self) -> None:
        with pytest.raises(FormatError) as exc_info:
            decode_header("cscope ² /src 0000000100\n".encode())

        assert "version" in str(exc_info.value)

    def test_non_ascii_digit_trailer(self) -> None:
        with pytest.raises(FormatError) as exc_info:
            decode_header("cscope 15 /src ١٠٠\n".encode())

        assert "trailer" in str(exc_info.value)

    def test_non_ascii_digit_is_not_a_symbol_count(self) -> None:
        with pytest.raises(FormatError) as exc_info:
            decode_header("cscope 15 /src -q ² 0000000100\n".encode())

        assert "²" in str(exc_info.value)

    def test_unrecognized_flag(self) -> None:
        with pytest.raises(FormatError) as exc_info:
            decode_header(b"cscope 15 /src -z 0000000100\n")

        assert "-z" in str(exc_info.value)

    def test_missing_trailer(self) -> None:
        with pytest.raises(FormatError):
            decode_header(b"cscope 15 /src\n")

    def test_empty_buffer(self) -> None:
        with pytest.raises(FormatError):
            decode_header(b"")

    def test_unterminated_header(self) -> None:
        with pytest.raises(FormatError):
            decode_header(b"cscope 15 /src 0000000100")

    def test_overlong_header(self) -> None:
        with pytest.raises(FormatError):
            decode_header(b"cscope 15 /" + b"a" * 2000 + b" 0000000100\n")

    def test_format_error_is_csgraph_error(self) -> None:
        assert issubclass(FormatError, CsgraphError)
        assert issubclass(TruncatedRecordError, CsgraphError)


class TestLoadErrors:
    """Tests for whole-database failures."""

    def test_bad_header_aborts_load(self, make_database) -> None:
        data = make_database("\t@a.c\n\n1 \n\t$f\n() {\n\n", version=15)
        data = b"xscope" + data[len(b"cscope") :]

        with pytest.raises(FormatError):
            load_database(data)

    def test_read_missing_database(self, temp_dir) -> None:
        with pytest.raises(FileNotFoundError) as exc_info:
            read_database(temp_dir / "cscope.out")

        assert "cscope.out" in str(exc_info.value)


class TestQueryLeaves:
    """Unknown names are empty results, never errors."""

    def test_unknown_and_leaf_are_indistinguishable(self, sample_database: bytes) -> None:
        graph = build_call_graph(load_database(sample_database).files)

        assert compute_callees(graph, "no_such_function", 3) == []
        assert compute_callees(graph, "printf", 3) == []
        assert compute_callers(graph, "no_such_function", 3) == []

    def test_callers_of_undefined_function(self, sample_database: bytes) -> None:
        graph = build_call_graph(load_database(sample_database).files)
        result = compute_callers(graph, "printf", 1)

        assert [(e.caller, e.callee) for e in result] == [("helper", "printf")]
