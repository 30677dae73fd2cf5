"""
Helpers shared by the bicon subcommands
"""
import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


class CommandLineError(Exception):
    pass


class LevelPrefixFormatter(logging.Formatter):
    """Print INFO messages as they are and prefix all others with their level"""

    def format(self, record):
        message = super().format(record)
        if record.levelno == logging.INFO:
            return message
        return f"{record.levelname}: {message}"


def setup_logging(debug: bool) -> None:
    """Log to stderr. Include DEBUG messages if debug is True."""
    handler = logging.StreamHandler()
    handler.setFormatter(LevelPrefixFormatter())
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if debug else logging.INFO)


def log_to_file(path: Path) -> None:
    """Also write all log messages to the file at path"""
    handler = logging.FileHandler(path)
    handler.setFormatter(LevelPrefixFormatter())
    logging.getLogger().addHandler(handler)


def create_output_dir(path: Path, delete_existing: bool) -> None:
    """
    Create the output directory of a run. An existing directory is an error
    unless delete_existing is set, in which case it is replaced.
    """
    if path.exists() and delete_existing:
        logger.debug("Deleting existing output directory %s", path)
        shutil.rmtree(path)
    try:
        path.mkdir()
    except FileExistsError:
        raise CommandLineError(
            f"Output directory '{path}' already exists "
            "(use --delete to replace it)"
        ) from None


def add_graph_argument(parser) -> None:
    parser.add_argument(
        "graph",
        type=Path,
        metavar="GRAPH",
        help="Graph notation as JSON file (may be compressed with gzip, bzip2 or xz)",
    )
