import argparse
import logging
import sys

from api.network_api.errors import NetworkError, NetworkFormatError
from core.network_platform.engine import NetworkEngine
from datasource_tsv.datasource_tsv_plugin.plugin import TsvDatasourcePlugin
from exporter_distribution.exporter_distribution_plugin.plugin import DegreeDistributionExporter
from exporter_summary.exporter_summary_plugin.plugin import SummaryExporter

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_engine() -> NetworkEngine:
    engine = NetworkEngine()
    # Built-in plugins are usable without an installed distribution
    engine.registry.register_datasource("tsv", TsvDatasourcePlugin)
    engine.registry.register_exporter("distribution", DegreeDistributionExporter)
    engine.registry.register_exporter("summary", SummaryExporter)
    return engine


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Degree statistics of an interaction network')
    parser.add_argument('filepath', type=str, help='Tab-delimited interaction file')
    parser.add_argument('--add', action='append', default=[], metavar='A,B',
                        help='Add an interaction after loading (repeatable)')
    parser.add_argument('--degree', action='append', default=[], metavar='NAME',
                        help='Print the degree of a node (repeatable)')
    parser.add_argument('--distribution', type=str, metavar='OUT',
                        help='Write the degree distribution table to OUT')
    parser.add_argument('--atomic', action='store_true',
                        help='Discard the whole file on the first malformed line')
    parser.add_argument('--log-level', type=str.upper, default='WARNING', choices=LOG_LEVELS,
                        help='Logging level')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    engine = build_engine()
    try:
        engine.open_network("tsv", args.filepath, atomic=args.atomic)
        print(f"Network file {engine.workspace.get_name()} opened.")

        for interaction in args.add:
            engine.add_interaction(interaction)
            print(f"New interaction added for {interaction}")

        for name in args.degree:
            print(f"Node degree for {name} is: {engine.node_degree(name)}")

        print(engine.export("summary"))

        if args.distribution:
            engine.export("distribution", destination=args.distribution)
            print(f"Degree distribution file created at {args.distribution}")
    except NetworkFormatError as e:
        print(f"IO error: {e}", file=sys.stderr)
        return 1
    except NetworkError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"IO error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
