from django.utils.deprecation import MiddlewareMixin
from django.utils.functional import SimpleLazyObject

from .identity import get_identity


class IdentityMiddleware(MiddlewareMixin):
    """
    Attach the identity provider session to ``request.identity``.

    The token is only verified when the identity is first accessed.
    """

    def process_request(self, request):
        request.identity = SimpleLazyObject(lambda: get_identity(request))
