"""Tab-delimited interaction file datasource."""

from __future__ import annotations

from pathlib import Path

import pytest

from api.network_api.errors import MalformedFileLineError, NetworkFormatError
from datasource_tsv.datasource_tsv_plugin.plugin import TsvDatasourcePlugin


def write_lines(path: Path, *lines: str) -> Path:
    path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
    return path


def test_load_network_from_file(tmp_path: Path) -> None:
    path = write_lines(tmp_path / "ppi.txt", "P1\tP2", "P2\tP3", " P1 \t P3")

    network = TsvDatasourcePlugin().load_network(str(path))

    assert network.node_count == 3
    assert network.edge_count == 3
    assert network.max_degree() == 2


def test_file_path_option(tmp_path: Path) -> None:
    path = write_lines(tmp_path / "ppi.txt", "P1\tP2")
    network = TsvDatasourcePlugin().load_network(None, file_path=str(path))
    assert network.edge_count == 1


def test_windows_line_endings(tmp_path: Path) -> None:
    path = tmp_path / "ppi.txt"
    path.write_bytes(b"P1\tP2\r\nP2\tP3\r\n")
    network = TsvDatasourcePlugin().load_network(str(path))
    assert [node.name for node in network.nodes] == ["P1", "P2", "P3"]


def test_malformed_line_names_file_and_line(tmp_path: Path) -> None:
    path = write_lines(tmp_path / "broken.txt", "P1\tP2", "P2\tP3", "P1\tP2\tP3")

    with pytest.raises(MalformedFileLineError) as excinfo:
        TsvDatasourcePlugin().load_network(str(path))

    assert excinfo.value.source == "broken.txt"
    assert excinfo.value.line_number == 3
    assert str(excinfo.value) == "broken.txt:3:File is not in correct format."


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        TsvDatasourcePlugin().load_network(str(tmp_path / "absent.txt"))


def test_missing_path() -> None:
    with pytest.raises(ValueError):
        TsvDatasourcePlugin().load_network("  ")


def test_schema_lists_options() -> None:
    schema = TsvDatasourcePlugin().parameters_schema()
    assert schema["file_path"]["required"] is True
    assert schema["atomic"]["default"] is False


def test_undecodable_file_is_a_format_error(tmp_path: Path) -> None:
    path = tmp_path / "latin.txt"
    path.write_bytes(b"P1\tP2\n\xff\xfe\tP3\n")

    with pytest.raises(NetworkFormatError) as excinfo:
        TsvDatasourcePlugin().load_network(str(path))

    assert str(excinfo.value) == "latin.txt: File is not valid utf-8 text."
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_encoding_option(tmp_path: Path) -> None:
    path = tmp_path / "latin.txt"
    path.write_bytes(b"P1\tP\xe9\n")

    network = TsvDatasourcePlugin().load_network(str(path), encoding="latin-1")
    assert network.node_degree("Pé") == 1
