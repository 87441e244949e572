import os.path
from typing import Iterator
from api.network_api.datasource_common.base import BaseDatasourcePlugin
from api.network_api.errors import NetworkFormatError


class TsvDatasourcePlugin(BaseDatasourcePlugin):
    # Adapter to read a tab-delimited interaction list and create a Network object
    # One interaction per line, exactly two node names, no header line

    @property
    def plugin_id(self) -> str:
        return "tsv"

    @property
    def display_name(self) -> str:
        return "Tab-delimited interaction list"

    def parameters_schema(self) -> dict:
        return {
            "file_path": {
                "type": "str",
                "label": "Path to interaction file",
                "required": True
            },
            "encoding": {
                "type": "str",
                "label": "File encoding",
                "required": False,
                "default": "utf-8"
            },
            "atomic": {
                "type": "bool",
                "label": "Discard the whole file on the first malformed line",
                "required": False,
                "default": False
            }
        }

    def _read_lines(self, path, **kwargs) -> Iterator[str]:
        # Here we are using the TemplateMethod
        # Only reading the file is specific to this plugin, the network
        # parses the lines itself so errors carry the line number

        if not os.path.exists(path):
            raise FileNotFoundError(f"Interaction file not found: {path}")

        encoding = kwargs.get("encoding") or "utf-8"

        # newline="" keeps the terminators so the network strips them
        # the same way for every platform
        with open(path, 'r', encoding=encoding, newline='') as f:
            try:
                yield from f
            except UnicodeDecodeError as exc:
                # Decoding runs ahead of the lines handed out, so no line number
                raise NetworkFormatError(
                    f"{self._source_name(path)}: File is not valid {encoding} text."
                ) from exc
