"""Command-line tool for inspecting twig trees.

Builds a tree from the values given on the command line, applies the
requested deletions and prints the resulting shape with its extremes.
"""

import logging
from argparse import ArgumentParser
from typing import Any, List, Optional

from twig import constants
from twig.common import Impossible
from twig.config import Config, Format, init_config
from twig.tree import PTree


def build_tree(config: Config, inserts: List[str], deletes: List[str]) -> PTree[Any]:
    """Insert then delete the given raw values, in order.

    Args:
        config: Supplies the element type used to parse the values.
        inserts: Raw values to insert.
        deletes: Raw values to delete after all inserts.

    Returns:
        The final tree.

    Raises:
        ValueError: If a raw value does not parse as the element type.
    """
    tree: PTree[Any] = PTree.empty()
    for raw in inserts:
        value = config.elem_type.parse(raw)
        logging.debug("inserting %r", value)
        tree = tree.insert(value)
    for raw in deletes:
        value = config.elem_type.parse(raw)
        logging.debug("deleting %r", value)
        new_tree = tree.delete(value)
        if new_tree is tree:
            logging.debug("%r not present, tree unchanged", value)
        tree = new_tree
    return tree


def render_tree(config: Config, tree: PTree[Any]) -> str:
    match config.fmt:
        case Format.Shape:
            return tree.render()
        case Format.Pretty:
            return tree.pretty(config.indent)
        case Format.List:
            return " ".join(repr(value) for value in tree)
        case _:
            raise Impossible


def make_parser() -> ArgumentParser:
    """Create the command-line argument parser.

    Returns:
        An ArgumentParser configured with all the command-line options.
    """
    parser = ArgumentParser(prog="twig")
    parser.add_argument("--log-level", default=constants.DEFAULT_LOG_LEVEL)
    parser.add_argument(
        "--type", dest="elem_type", default=constants.DEFAULT_ELEM_TYPE
    )
    parser.add_argument("--format", dest="fmt", default=constants.DEFAULT_FORMAT)
    parser.add_argument("--indent", type=int, default=constants.DEFAULT_INDENT)
    parser.add_argument("--insert", nargs="*", default=[])
    parser.add_argument("--delete", nargs="*", default=[])
    return parser


def configure_logging(log_level: str) -> None:
    """Configure the logging system with the specified log level.

    Args:
        log_level: The logging level (e.g., 'DEBUG', 'INFO', 'WARNING').

    Raises:
        ValueError: If the level name is unknown.
    """
    level = logging.getLevelNamesMapping().get(log_level.upper())
    if level is None:
        raise ValueError(f"Unknown log level: {log_level}")
    logging.basicConfig(format=constants.LOG_FORMAT, level=level)


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments, build the tree and print it with its min and max."""
    parser = make_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(args.log_level)
        config = init_config(args.elem_type, args.fmt, args.indent)
        tree = build_tree(config, args.insert, args.delete)
    except ValueError as e:
        parser.error(str(e))
    logging.info("built tree of size %d and depth %d", tree.size(), tree.depth())
    print(render_tree(config, tree))
    print(f"min: {tree.min()!r}")
    print(f"max: {tree.max()!r}")


if __name__ == "__main__":
    main()
