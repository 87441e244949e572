import os
from jinja2 import Environment, FileSystemLoader
from api.network_api.services.exporter_plugin import ExporterPlugin
from api.network_api.model.network import Network

DEFAULT_NETWORK_NAME = "Untitled"


class DegreeDistributionExporter(ExporterPlugin):
    @property
    def plugin_id(self) -> str:
        return "distribution"

    @property
    def display_name(self) -> str:
        return "Degree Distribution Table"

    def render_options_schema(self) -> dict:
        return {
            "network_name": {
                "type": "str",
                "label": "Name written in the header line",
                "required": False,
                "default": DEFAULT_NETWORK_NAME
            }
        }

    def render(self, network: Network, **options) -> str:
        # One row per degree from 1 to the hub degree, missing degrees count 0
        rows = network.dense_degree_distribution()

        # --- Template Rendering ---
        template_path = os.path.join(os.path.dirname(__file__), 'templates')
        env = Environment(loader=FileSystemLoader(template_path))
        template = env.get_template('distribution.tsv')

        return template.render(
            network_name=options.get("network_name") or DEFAULT_NETWORK_NAME,
            rows=rows,
        )
