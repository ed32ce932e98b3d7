"""Command-line interface for pygraphs.

Usage:
    pygraphs pie <file> --output <chart.svg>
    pygraphs layout <file>
    pygraphs --version
"""

import argparse
import json
import sys
import time
from pathlib import Path

from pygraphs import EdgeInsets, PieGraphConfig, __version__, render_pie
from pygraphs.api import frame_to_series
from pygraphs.render.format_utils import LABELERS


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="pygraphs",
        description="pygraphs - Pie and donut charts from keyed numeric data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pygraphs pie sales.csv --key region --value amount --output sales.svg
  pygraphs pie sales.csv -o sales.svg --donut 0.4 --indent 0.02
  pygraphs layout sales.csv --key region --value amount
        """,
    )

    parser.add_argument(
        "--version", "-v", action="version", version=f"pygraphs {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    def add_common(p: argparse.ArgumentParser) -> None:
        p.add_argument("file", type=str, help="Path to the data file (CSV, JSON or Parquet)")
        p.add_argument("--key", "-k", type=str, default=None, help="Column holding the keys")
        p.add_argument("--value", type=str, default=None, help="Column holding the values")
        p.add_argument(
            "--sort",
            choices=["none", "key", "value"],
            default="none",
            help="Order units by key or by descending value (default: file order)",
        )
        p.add_argument(
            "--labels",
            choices=sorted(LABELERS),
            default="percent",
            help="Label text drawn on each segment (default: percent)",
        )
        p.add_argument(
            "--donut", type=float, default=0.0, help="Donut hole ratio in [0, 1] (default: 0)"
        )
        p.add_argument(
            "--indent",
            type=float,
            default=0.0,
            help="Gap in radians on both edges of every segment (default: 0)",
        )
        p.add_argument("--width", type=float, default=240, help="Chart width (default: 240)")
        p.add_argument("--height", type=float, default=240, help="Chart height (default: 240)")
        p.add_argument(
            "--padding", type=float, default=0.0, help="Inset on every side (default: 0)"
        )
        p.add_argument(
            "--quiet", "-q", action="store_true", help="Suppress progress output"
        )

    pie_parser = subparsers.add_parser(
        "pie",
        help="Render an SVG pie or donut chart",
        description="Read keyed values from a file and render an SVG chart.",
    )
    add_common(pie_parser)
    pie_parser.add_argument(
        "--output", "-o", type=str, required=True, help="Output path for the SVG"
    )

    layout_parser = subparsers.add_parser(
        "layout",
        help="Output segment geometry as JSON (no SVG)",
        description="Read keyed values from a file and print the pie layout as JSON.",
    )
    add_common(layout_parser)
    layout_parser.add_argument(
        "--output", "-o", type=str, default=None, help="Output path for JSON (default: stdout)"
    )

    return parser


def load_data(file_path: str):
    """Load a table from a file path.

    Args:
        file_path: Path to a CSV, JSON or Parquet file.

    Returns:
        pandas DataFrame
    """
    import pandas as pd

    path = Path(file_path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    suffix = path.suffix.lower()

    if suffix == ".csv":
        return pd.read_csv(file_path)
    elif suffix == ".parquet":
        return pd.read_parquet(file_path)
    elif suffix == ".json":
        return pd.read_json(file_path)
    else:
        raise ValueError(f"Unsupported file format: {suffix}. Use CSV, Parquet, or JSON.")


def _sort_fn(mode: str):
    if mode == "key":
        return lambda a, b: str(a[0]) < str(b[0])
    if mode == "value":
        return lambda a, b: b[1] < a[1]
    return None


def _build_chart(args: argparse.Namespace):
    df = load_data(args.file)
    series = frame_to_series(df, args.key, args.value)
    # duplicate keys are summed so every key gets one segment
    data = series.groupby(level=0, sort=False).sum().to_dict()
    pad = args.padding
    config = PieGraphConfig(
        donut_radius_ratio=args.donut,
        fractions_indent=args.indent,
        content_insets=EdgeInsets(top=pad, left=pad, bottom=pad, right=pad),
    )
    return render_pie(
        data,
        config=config,
        width=args.width,
        height=args.height,
        sort_fn=_sort_fn(args.sort),
        label_fn=LABELERS[args.labels],
    )


def cmd_pie(args: argparse.Namespace) -> int:
    """Execute the pie command."""
    if not args.quiet:
        print(f"Loading data from: {args.file}", file=sys.stderr)

    start_time = time.perf_counter()

    try:
        chart = _build_chart(args)
    except (FileNotFoundError, ValueError, TypeError, KeyError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        chart.save_svg(args.output)
    except OSError as e:
        print(f"Error saving chart: {e}", file=sys.stderr)
        return 1

    elapsed = time.perf_counter() - start_time

    if not args.quiet:
        print(f"Chart saved to: {args.output}", file=sys.stderr)
        print(f"Completed in {elapsed:.2f} seconds", file=sys.stderr)

    return 0


def cmd_layout(args: argparse.Namespace) -> int:
    """Execute the layout command."""
    if not args.quiet:
        print(f"Loading data from: {args.file}", file=sys.stderr)

    try:
        chart = _build_chart(args)
    except (FileNotFoundError, ValueError, TypeError, KeyError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        try:
            chart.save_json(args.output)
            if not args.quiet:
                print(f"Layout saved to: {args.output}", file=sys.stderr)
        except OSError as e:
            print(f"Error saving layout: {e}", file=sys.stderr)
            return 1
    else:
        print(json.dumps(chart.to_dict(), indent=2))

    return 0


def main(argv=None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "pie":
        return cmd_pie(args)
    elif args.command == "layout":
        return cmd_layout(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
