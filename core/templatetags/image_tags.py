from urllib.parse import urlencode

from django import template
from django.urls import reverse

from core.images import is_allowed_remote_image

register = template.Library()


@register.simple_tag
def remote_image(url):
    """Route an allowed remote image through the image proxy."""
    if not is_allowed_remote_image(url):
        return ""
    return f"{reverse('image_proxy')}?{urlencode({'url': url})}"
