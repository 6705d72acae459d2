"""Lay out a chart options document from a file and print the result as JSON."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from charts.params import build_layout_params, decode_options
from geometry.engine import layout_chart

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """Print the layout for a chart options JSON document."""

    help = "Validate a chart options JSON file (or '-' for stdin) and print its layout."

    def add_arguments(self, parser) -> None:
        """Add command arguments."""

        parser.add_argument("path", help="Options JSON file, or '-' to read stdin.")
        parser.add_argument("--width", default=None, help="Canvas width in pixels.")
        parser.add_argument("--height", default=None, help="Canvas height (default: options height).")
        parser.add_argument("--id", dest="chart_id", default="chart", help="Chart id used for SVG definitions.")
        parser.add_argument("--hidden", default=None, help="Comma-separated series positions to hide.")
        parser.add_argument("--indent", type=int, default=2, help="JSON indent (0 for compact output).")

    def handle(self, *args, **options) -> str | None:
        """Run the command."""

        path: str = options["path"]
        if path == "-":
            text = sys.stdin.read()
        else:
            try:
                text = Path(path).read_text(encoding="utf-8")
            except OSError as exc:
                raise CommandError(f"Cannot read {path!r}: {exc}") from exc

        try:
            raw = decode_options(text)
            params = build_layout_params(
                chart_id=options["chart_id"],
                width=options["width"],
                height=options["height"],
                hidden=options["hidden"],
                default_width=settings.CHARTLAYOUT_DEFAULT_WIDTH,
            )
            layout = layout_chart(
                raw,
                chart_id=params.chart_id,
                width=params.width,
                height=params.height,
                hidden_series=params.hidden_series,
                explode_offset=settings.CHARTLAYOUT_EXPLODE_OFFSET,
            )
        except ValueError as exc:
            raise CommandError(str(exc)) from exc

        if not layout.is_valid:
            raise CommandError("Invalid chart options:\n" + "\n".join(f"- {err}" for err in layout.errors))

        indent = options["indent"] or None
        self.stdout.write(json.dumps(layout.as_json(), indent=indent))
        logger.debug("Printed layout for chart %s", layout.chart_id)
        return None
