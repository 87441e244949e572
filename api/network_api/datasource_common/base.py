# base.py
from __future__ import annotations

import logging
import os.path
from abc import abstractmethod
from typing import Any, Iterable

from api.network_api.model import Network
from api.network_api.services.datasource_plugin import DataSourcePlugin

LOGGER = logging.getLogger(__name__)


class BaseDatasourcePlugin(DataSourcePlugin):
    # Base class for defining the flow of creating a Network object
    # The flow is always to first read the source lines (this is different based on plugin)
    # Secondly, the network adds one edge per line (which is the same for all)

    def load_network(self, source: Any, **options: Any) -> Network:
        path = self._resolve_path(source, options)
        atomic = bool(options.get("atomic", False))

        network = Network()
        lines = self._read_lines(path, **options)
        count = network.load_from_lines(lines, source=self._source_name(path), atomic=atomic)

        LOGGER.info(
            "%s loaded %s: %d lines, %d nodes, %d edges.",
            self.display_name, path, count, network.node_count, network.edge_count,
        )
        return network

    @staticmethod
    def _resolve_path(source: Any, options: dict[str, Any]) -> str:
        if isinstance(source, str) and source.strip():
            return source
        fp = options.get("file_path")
        if isinstance(fp, str) and fp.strip():
            return fp
        raise ValueError("Missing file path. Provide it as 'source' or as option 'file_path'.")

    @staticmethod
    def _source_name(path: str) -> str:
        # Errors name the file, not the full path
        return os.path.basename(path)

    @abstractmethod
    def _read_lines(self, path: str, **options: Any) -> Iterable[str]:
        # This will be implemented by all classes that extends this .py
        pass
