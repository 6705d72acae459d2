"""JSON views for the chart layout front-end.

The browser editor posts the options document it is editing and draws the
returned layout. Every failure is reported as a 400 JSON payload with an
`errors` list so the editor can show it inline.
"""

from __future__ import annotations

import logging

from django.conf import settings
from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST

from charts.params import build_layout_params, decode_options
from geometry.engine import layout_chart
from geometry.options import DEFAULT_CHART_OPTIONS

logger = logging.getLogger(__name__)


def _error_response(errors: list[str]) -> JsonResponse:
    """Return the standard 400 payload for rejected requests."""

    return JsonResponse({"ok": False, "errors": errors}, status=400)


@csrf_exempt
@require_POST
def layout_api(request: HttpRequest) -> JsonResponse:
    """Validate a posted options document and return its layout.

    Query parameters: `width`, `height`, `id` and `hidden` (comma-separated
    series positions toggled off in the legend).
    """

    try:
        raw = decode_options(request.body)
        params = build_layout_params(
            chart_id=request.GET.get("id"),
            width=request.GET.get("width"),
            height=request.GET.get("height"),
            hidden=request.GET.get("hidden"),
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
        logger.info("Rejected layout request: %s", exc)
        return _error_response([str(exc)])

    if not layout.is_valid:
        logger.info("Rejected chart %s: %s", layout.chart_id, "; ".join(layout.errors))
        return JsonResponse(layout.as_json(), status=400)

    logger.debug("Laid out %s chart %s", layout.options.type, layout.chart_id)
    return JsonResponse(layout.as_json())


@require_GET
def defaults_api(request: HttpRequest) -> JsonResponse:
    """Return the defaults applied to omitted optional options."""

    return JsonResponse({"defaults": dict(DEFAULT_CHART_OPTIONS)})
