from importlib.metadata import entry_points
from api.network_api.services import DataSourcePlugin
from api.network_api.services import ExporterPlugin
from typing import Dict, Type

DATASOURCE_GROUP = "network_platform.datasource"
EXPORTER_GROUP = "network_platform.exporter"


def _discover(group: str) -> Dict[str, type]:
    return {ep.name: ep.load() for ep in entry_points().select(group=group)}


class PluginRegistry:
    # One registry per process; installed plugins are found through entry
    # points, drivers may add their own with register_*

    _instance = None
    _datasources: Dict[str, Type[DataSourcePlugin]]
    _exporters: Dict[str, Type[ExporterPlugin]]

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._datasources = _discover(DATASOURCE_GROUP)
            cls._instance._exporters = _discover(EXPORTER_GROUP)
        return cls._instance

    def register_datasource(self, name: str, plugin_cls: Type[DataSourcePlugin]) -> None:
        self._datasources[name] = plugin_cls

    def register_exporter(self, name: str, plugin_cls: Type[ExporterPlugin]) -> None:
        self._exporters[name] = plugin_cls

    def get_datasource(self, name: str) -> Type[DataSourcePlugin] | None:
        return self._datasources.get(name)

    def get_exporter(self, name: str) -> Type[ExporterPlugin] | None:
        return self._exporters.get(name)

    def list_datasources(self) -> list[str]:
        return sorted(self._datasources)

    def list_exporters(self) -> list[str]:
        return sorted(self._exporters)
