import logging
from functools import wraps

from django.conf import settings
from django.contrib import messages
from django.http import JsonResponse
from django.middleware.csrf import CsrfViewMiddleware
from django.shortcuts import redirect

from .identity import IdentityProviderError, uses_bearer_token
from .models import Admin

logger = logging.getLogger(__name__)


def admin_required(function=None, redirect_to="/"):
    """
    Decorator for views that checks that the signed-in user has an Admin row.
    Anonymous users go to the sign-in page, signed-in non-admins are sent to
    ``redirect_to``. On success the admin and their school are attached to
    the request.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(request, *args, **kwargs):
            identity = request.identity
            try:
                is_authenticated = identity.is_authenticated
            except IdentityProviderError:
                logger.exception("Identity provider unavailable")
                return redirect(settings.SIGN_IN_URL)
            if not is_authenticated:
                return redirect(settings.SIGN_IN_URL)

            admin = Admin.objects.for_identity(identity)
            if admin is None:
                messages.error(request, "Access denied. School administrator required.")
                return redirect(redirect_to)

            request.admin = admin
            request.school = admin.school
            return view(request, *args, **kwargs)
        return wrapper

    return decorator(function) if function else decorator


def api_admin_required(function=None, unauthenticated="Not authenticated", forbidden="Not authorized"):
    """JSON counterpart of ``admin_required``: 401 without a session, 403 without an Admin row."""

    def decorator(view):
        @wraps(view)
        def wrapper(request, *args, **kwargs):
            identity = request.identity
            try:
                is_authenticated = identity.is_authenticated
            except IdentityProviderError:
                logger.exception("Identity provider unavailable")
                return JsonResponse({"error": "Authentication failed"}, status=401)
            if not is_authenticated:
                return JsonResponse({"error": unauthenticated}, status=401)

            admin = Admin.objects.for_identity(identity)
            if admin is None:
                return JsonResponse({"error": forbidden}, status=403)

            request.admin = admin
            request.school = admin.school
            return view(request, *args, **kwargs)
        return wrapper

    return decorator(function) if function else decorator


def session_csrf_failed(request):
    """
    Run Django's CSRF check for callers that rely on the session cookie.

    The JSON routes are ``csrf_exempt`` so that body parsing errors stay
    inside the view; call this from within the view's error handling.
    Bearer-token callers skip the check.
    """
    if uses_bearer_token(request):
        return False
    rejection = CsrfViewMiddleware(lambda req: None).process_view(request, None, (), {})
    return rejection is not None
