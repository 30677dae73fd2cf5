"""
Decompose undirected graphs into their biconnected components
"""
import sys
import logging
from argparse import ArgumentParser, RawDescriptionHelpFormatter

from . import __version__
from .cli import CommandLineError, setup_logging
from .cli import components, export

logger = logging.getLogger(__name__)

SUBCOMMANDS = {
    "components": components,
    "export": export,
}


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        description=__doc__, prog="bicon", formatter_class=RawDescriptionHelpFormatter
    )
    parser.add_argument(
        "--version", action="version", version="%(prog)s " + __version__
    )
    parser.add_argument(
        "--debug",
        default=False,
        action="store_true",
        help="Print some extra debugging messages",
    )
    subparsers = parser.add_subparsers(dest="subcommand", metavar="SUBCOMMAND")
    subparsers.required = True
    for name, module in SUBCOMMANDS.items():
        subparser = subparsers.add_parser(
            name,
            help=module.__doc__.strip().split("\n", maxsplit=1)[0],
            description=module.__doc__,
            formatter_class=RawDescriptionHelpFormatter,
        )
        module.add_arguments(subparser)
        subparser.set_defaults(run=module.main)
    return parser


def main(arguments=None):
    args = build_parser().parse_args(arguments)
    setup_logging(args.debug)
    try:
        args.run(args)
    except CommandLineError as e:
        logger.error("bicon error: %s", e)
        logger.debug("Traceback:", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
