"""Registry, workspace and engine orchestration."""

from __future__ import annotations

from pathlib import Path

import pytest

from api.network_api.errors import MalformedFileLineError, MalformedInteractionError
from api.network_api.model import Network
from core.network_platform import NetworkEngine, PluginRegistry, Workspace
from datasource_tsv.datasource_tsv_plugin.plugin import TsvDatasourcePlugin
from exporter_distribution.exporter_distribution_plugin.plugin import DegreeDistributionExporter
from exporter_summary.exporter_summary_plugin.plugin import SummaryExporter


@pytest.fixture
def engine() -> NetworkEngine:
    engine = NetworkEngine()
    engine.registry.register_datasource("tsv", TsvDatasourcePlugin)
    engine.registry.register_exporter("distribution", DegreeDistributionExporter)
    engine.registry.register_exporter("summary", SummaryExporter)
    return engine


@pytest.fixture
def ppi_file(tmp_path: Path) -> Path:
    path = tmp_path / "ppi.txt"
    path.write_text("P1\tP2\nP2\tP3\nP1\tP3\n", encoding="utf-8")
    return path


def test_registry_is_shared() -> None:
    registry = PluginRegistry()
    registry.register_exporter("summary", SummaryExporter)
    assert PluginRegistry() is registry
    assert "summary" in PluginRegistry().list_exporters()
    assert registry.get_datasource("no-such-plugin") is None


def test_open_network_sets_workspace(engine: NetworkEngine, ppi_file: Path) -> None:
    network = engine.open_network("tsv", str(ppi_file))

    assert engine.workspace.get_network() is network
    assert engine.summary() == {"network": "ppi.txt", "nodes": 3, "edges": 3}
    assert engine.node_degree("P2") == 2
    assert engine.average_degree() == 2.0
    assert engine.hubs()[0] == 2
    assert engine.degree_distribution() == {2: 3}


def test_open_replaces_network(engine: NetworkEngine, ppi_file: Path, tmp_path: Path) -> None:
    other = tmp_path / "pair.txt"
    other.write_text("Q1\tQ2\n", encoding="utf-8")

    engine.open_network("tsv", str(ppi_file))
    second = engine.open_network("tsv", str(other))

    assert engine.workspace.get_network() is second
    assert engine.summary() == {"network": "pair.txt", "nodes": 2, "edges": 1}

    engine.clear_workspace()
    assert engine.summary() == {"network": "", "nodes": 0, "edges": 0}


def test_failed_open_keeps_current_network(engine: NetworkEngine, ppi_file: Path, tmp_path: Path) -> None:
    broken = tmp_path / "broken.txt"
    broken.write_text("Q1\tQ2\nQ3\n", encoding="utf-8")

    current = engine.open_network("tsv", str(ppi_file))
    with pytest.raises(MalformedFileLineError):
        engine.open_network("tsv", str(broken))

    assert engine.workspace.get_network() is current


def test_unknown_plugins(engine: NetworkEngine) -> None:
    with pytest.raises(ValueError):
        engine.open_network("no-such-plugin", "x.txt")
    with pytest.raises(ValueError):
        engine.export("no-such-plugin")


def test_add_interaction_without_open_network(engine: NetworkEngine) -> None:
    engine.add_interaction("P12459,P60879")
    assert engine.summary() == {"network": "Untitled", "nodes": 2, "edges": 1}

    with pytest.raises(MalformedInteractionError):
        engine.add_interaction("P12459")
    assert engine.summary()["edges"] == 1


def test_export_writes_destination(engine: NetworkEngine, ppi_file: Path, tmp_path: Path) -> None:
    engine.open_network("tsv", str(ppi_file))
    out = tmp_path / "distribution.txt"

    output = engine.export("distribution", destination=str(out))

    assert out.read_text(encoding="utf-8") == output
    assert output.splitlines() == [
        "Network: ppi.txt",
        "Degree\tNo. of nodes with this degree",
        "1\t0",
        "2\t3",
    ]


def test_workspace_listing() -> None:
    workspace = Workspace()
    assert workspace.list_nodes() == []
    assert workspace.list_edges() == []

    network = Network()
    network.load_from_lines(["A\tB", "B\tC"])
    workspace.set_network(network, "abc.txt")

    assert [node.name for node in workspace.list_nodes()] == ["A", "B", "C"]
    assert [str(edge) for edge in workspace.list_edges()] == ["<A>-<B>", "<B>-<C>"]

    workspace.clear()
    assert not workspace.has_network()
    assert workspace.get_name() == ""
