"""Render a few pie and donut variants next to this script."""

import os

from pygraphs import EdgeInsets, PieGraphConfig, render_pie
from pygraphs.render.format_utils import percent_label

HERE = os.path.dirname(os.path.abspath(__file__))

budget = {"Rent": 1200, "Food": 450, "Transport": 160, "Savings": 300, "Other": 90}


def main() -> None:
    variants = {
        "pie": PieGraphConfig(),
        "donut": PieGraphConfig(donut_radius_ratio=0.45),
        "gutters": PieGraphConfig(
            donut_radius_ratio=0.3,
            fractions_indent=0.015,
            content_insets=EdgeInsets(top=10, left=10, bottom=10, right=10),
        ),
    }
    for name, config in variants.items():
        chart = render_pie(
            budget,
            config=config,
            width=320,
            height=320,
            sort_fn=lambda a, b: a[1] > b[1],
            label_fn=percent_label,
        )
        path = os.path.join(HERE, f"budget_{name}.svg")
        chart.save(path)
        print(f"wrote {path}")


if __name__ == "__main__":
    main()
