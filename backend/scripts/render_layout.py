"""Render a medal catalog layout to JSON on stdout.

Handy for inspecting how a catalog lays out without starting the HTTP backend.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Optional

from pydantic import ValidationError

from skilltree.layout_models import LayoutOptions
from skilltree.layout_service import compute_layout
from skilltree.medal_catalog import load_catalog
from skilltree.presets import create_layout_registry

LOGGER = logging.getLogger("skilltree.render_layout")


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compute a medal layout and print it as JSON.")
    parser.add_argument(
        "--catalog",
        default=os.getenv("SKILLTREE_MEDAL_CATALOG"),
        help="Path to the medal catalog JSON (default: $SKILLTREE_MEDAL_CATALOG).",
    )
    parser.add_argument("--preset", default=None, help="Layout preset id (default: registry default).")
    parser.add_argument("--year-width", type=float, default=None)
    parser.add_argument("--lane-height", type=float, default=None)
    parser.add_argument("--row-height", type=float, default=None)
    parser.add_argument("--radius", type=float, default=None)
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2).")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    args = parse_args(argv)
    if not args.catalog:
        LOGGER.error("No catalog given; pass --catalog or set SKILLTREE_MEDAL_CATALOG.")
        return 1
    try:
        options = LayoutOptions(
            year_width=args.year_width,
            lane_height=args.lane_height,
            row_height=args.row_height,
            radius=args.radius,
        )
        catalog = load_catalog(args.catalog)
        registry = create_layout_registry(os.getenv("SKILLTREE_DEFAULT_LAYOUT"))
        layout = compute_layout(registry, catalog.medals, preset_id=args.preset, options=options)
    except (OSError, ValueError, ValidationError, LookupError) as exc:
        LOGGER.exception("Failed to render layout: %s", exc)
        return 1
    print(json.dumps(layout.model_dump(mode="json", by_alias=True), indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
