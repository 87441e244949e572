import os
from jinja2 import Environment, FileSystemLoader
from api.network_api.services.exporter_plugin import ExporterPlugin
from api.network_api.model.network import Network

DEFAULT_NETWORK_NAME = "Untitled"
DEFAULT_PRECISION = 3


class SummaryExporter(ExporterPlugin):
    @property
    def plugin_id(self) -> str:
        return "summary"

    @property
    def display_name(self) -> str:
        return "Network Statistics Summary"

    def render_options_schema(self) -> dict:
        return {
            "network_name": {
                "type": "str",
                "label": "Name of the network",
                "required": False,
                "default": DEFAULT_NETWORK_NAME
            },
            "precision": {
                "type": "int",
                "label": "Decimal places of the average degree",
                "required": False,
                "default": DEFAULT_PRECISION
            }
        }

    def render(self, network: Network, **options) -> str:
        precision = int(options.get("precision", DEFAULT_PRECISION))

        # Average degree is undefined without nodes
        if network.node_count:
            average = f"{network.average_degree():.{precision}f}"
        else:
            average = "n/a"

        hub_degree, hubs = network.hubs()

        template_path = os.path.join(os.path.dirname(__file__), 'templates')
        env = Environment(loader=FileSystemLoader(template_path))
        template = env.get_template('summary.txt')

        return template.render(
            network_name=options.get("network_name") or DEFAULT_NETWORK_NAME,
            total_nodes=network.node_count,
            total_edges=network.edge_count,
            average=average,
            hub_degree=hub_degree,
            hubs=hubs,
        )
