"""Initializes and configures the argparse parser for the CLI."""

import argparse

from notestool.config import Config


def initialize_parser():
    """
    Build and return the argparse parser.

    Accepted invocations:
    - notestool COLLECTION_NAME
    - notestool help

    There are no options; every argument is positional, so names starting
    with '-' are collection names too.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog=Config.APP_NAME,
        description="Manage short single-line notes in the specified collection.",
        add_help=False,
    )

    parser.add_argument(
        "collection",
        nargs="*",
        metavar="COLLECTION_NAME",
        help="File holding the notes collection ('help' shows usage)",
    )

    return parser


def parse_collection_name(argv):
    """
    Return the collection name from argv, or None when usage should be shown.

    Exactly one argument other than 'help' names a collection.
    """
    # "--" ends option parsing so '-v' or '-notes' stay positional
    args = initialize_parser().parse_args(["--", *argv])
    if len(args.collection) != 1 or args.collection[0] == "help":
        return None
    return args.collection[0]
