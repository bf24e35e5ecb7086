import argparse
import logging
import sys

from . import CFG, CYKParser, EarleyParser, ItemKind


def demo_grammar() -> CFG:
    # Small English grammar in Chomsky normal form, with PP-attachment ambiguity
    return CFG(
        [
            ("S", ["NP", "VP"]),
            ("NP", ["Det", "N"]),
            ("NP", ["NP", "PP"]),
            ("VP", ["V", "NP"]),
            ("VP", ["VP", "PP"]),
            ("VP", ["sleeps"]),
            ("PP", ["P", "NP"]),
            ("Det", ["the"]),
            ("Det", ["a"]),
            ("N", ["cat"]),
            ("N", ["mat"]),
            ("N", ["dog"]),
            ("N", ["telescope"]),
            ("V", ["likes"]),
            ("V", ["saw"]),
            ("P", ["on"]),
            ("P", ["with"]),
        ],
        start_symbol="S",
    )


def run_sequence(tokens: list[str], *, algorithm: str = "earley", start: str | None = None) -> int:
    g = demo_grammar()
    p = CYKParser(g, start) if algorithm == "cyk" else EarleyParser(g, start)
    chart = p.parse(tokens)
    accepted = bool(chart.full_parse_items(p.S))
    print(f"tokens: {' '.join(tokens)}")
    print(f"chart items: {chart.total_item_count()}")
    print("accepted?", accepted)
    kind = ItemKind.CYK if algorithm == "cyk" else ItemKind.EARLEY
    for tree in chart.parse_trees(p.S, kind):
        print(tree.pformat(margin=10_000))
    return 0 if accepted else 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="chart-parser",
        description=(
            "Demo CLI for the chart_parsers package. Parses the input tokens "
            "with a small English grammar and prints the parse trees."
        ),
    )
    parser.add_argument(
        "tokens",
        nargs="*",
        help="Space-separated input tokens (default: 'the cat likes the mat').",
    )
    parser.add_argument(
        "--algorithm",
        choices=["earley", "cyk"],
        default="earley",
        help="Chart-parsing algorithm (default: earley).",
    )
    parser.add_argument(
        "--start",
        default=None,
        help="Start symbol (default: the grammar's, S).",
    )
    parser.add_argument("--log-level", default="WARNING", help="Python logging level (default: WARNING)")
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))
    tokens = args.tokens or ["the", "cat", "likes", "the", "mat"]
    return run_sequence(tokens, algorithm=args.algorithm, start=args.start)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
