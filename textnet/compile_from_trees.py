"""
compile_from_trees.py — CLI for the TextNet compiler
====================================================
Reads bracketed constituency trees (one or more per file, or from STDIN),
compiles them into a text network and writes it out.

Usage
-----
    textnet-compile [trees.txt] [options]

Options
-------
    -f, --file   <path>   Write the graph as GEXF to <path>
    --json                Print the graph as JSON to stdout
    -v, --verbose         Log the propositions of every sentence
    --log-level  <level>  Logging level (default: TEXTNET_LOG_LEVEL or WARNING)

Examples
--------
    # Compile a parser's output to a Gephi file:
    textnet-compile parsed.txt -f network.gexf

    # Pipe a tree in and print the propositions:
    echo "(S (NP (NN dog)) (VP (VBZ barks)))" | textnet-compile --verbose --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from textnet.config import load_settings

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="textnet-compile",
        description="Compile bracketed constituency trees into a text network.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    p.add_argument(
        "trees",
        metavar="trees.txt",
        nargs="?",
        help="File of bracketed trees. Reads STDIN when omitted.",
    )
    p.add_argument(
        "-f", "--file",
        metavar="PATH",
        help="Write the graph to PATH as GEXF.",
    )
    p.add_argument(
        "--json",
        dest="print_json",
        action="store_true",
        help="Print the serialized graph to stdout.",
    )
    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=None,
        help="Log the propositions of every sentence.",
    )
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )
    return p


def main(argv=None) -> int:
    settings = load_settings()
    args = _build_parser().parse_args(argv)

    verbose = settings.verbose if args.verbose is None else args.verbose
    level = args.log_level or ("INFO" if verbose else settings.log_level)
    if level not in LOG_LEVELS:
        print(f"[error] Unknown log level: {level}", file=sys.stderr)
        return 1
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    if args.trees:
        path = Path(args.trees)
        if not path.exists():
            print(f"[error] File not found: {path}", file=sys.stderr)
            return 1
        text = path.read_text(encoding="utf-8")
    else:
        text = sys.stdin.read()

    from textnet.compiler import TreeSyntaxError, compile_trees, read_trees
    try:
        trees = read_trees(text)
    except TreeSyntaxError as exc:
        print(f"[error] Malformed tree: {exc}", file=sys.stderr)
        return 1

    logger.info(f"compiling {len(trees)} sentence tree(s)")
    graph = compile_trees(trees, verbose=verbose)

    if args.file:
        from textnet.compiler.exporter import write_gexf
        write_gexf(graph, args.file)

    if args.print_json:
        from textnet.server.serializers.graph_serializer import serialize_graph
        print(json.dumps(serialize_graph(graph), indent=2))

    return 0


if __name__ == "__main__":
    sys.exit(main())
