"""Drive a Chart by hand, then let the Earley parser fill one."""
from chart_parsers import Chart, EarleyParser, ItemKind
from chart_parsers.__main__ import demo_grammar


def main() -> None:
    tokens = "the dog saw the cat with a telescope".split()
    p = EarleyParser(demo_grammar())
    chart: Chart = p.parse(tokens)

    print(f"{len(tokens)} tokens, {chart.total_item_count()} items")
    for k in range(chart.n + 1):
        print(f"  ending at {k}: {chart.count_items_to(k)}")

    print("Complete constituents over [3, 5]:")
    for it in chart.complete_items_spanning(3, 5):
        print("  ", it)

    print("Parses:")
    for tree in chart.parse_trees("S", ItemKind.EARLEY):
        tree.pretty_print()


if __name__ == "__main__":
    main()
