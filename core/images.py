"""
Remote image handling.

Only hosts listed in ``settings.IMAGES_REMOTE_HOSTS`` may be used as image
sources. Anything else is rejected by the validator and by ``image_proxy``.
"""
import logging
from urllib.parse import urlparse

import requests
from django.conf import settings
from django.core.exceptions import ValidationError
from django.http import HttpResponse, HttpResponseBadRequest
from django.utils.translation import gettext_lazy as _
from django.views.decorators.http import require_GET

logger = logging.getLogger(__name__)

CACHE_CONTROL = "public, max-age=86400"


def is_allowed_remote_image(url):
    """Return True if ``url`` is an http(s) URL on an allowed host."""
    if not url:
        return False
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https"):
        return False
    host = (parsed.hostname or "").lower()
    return host in settings.IMAGES_REMOTE_HOSTS


def validate_remote_image_url(value):
    if value and not is_allowed_remote_image(value):
        raise ValidationError(
            _("Images must be hosted on one of: %(hosts)s"),
            params={"hosts": ", ".join(settings.IMAGES_REMOTE_HOSTS)},
            code="invalid_image_host",
        )


@require_GET
def image_proxy(request):
    url = request.GET.get("url", "")
    if not url:
        return HttpResponseBadRequest('"url" parameter is required')
    if not is_allowed_remote_image(url):
        return HttpResponseBadRequest('"url" parameter is not allowed')

    try:
        upstream = requests.get(url, timeout=settings.IMAGE_FETCH_TIMEOUT)
        upstream.raise_for_status()
    except requests.RequestException:
        logger.exception("Failed to fetch remote image %s", url)
        return HttpResponse("Upstream image could not be fetched", status=502)

    content_type = upstream.headers.get("Content-Type", "application/octet-stream")
    if not content_type.startswith("image/"):
        return HttpResponse("Upstream response is not an image", status=502)

    response = HttpResponse(upstream.content, content_type=content_type)
    response["Cache-Control"] = CACHE_CONTROL
    return response
