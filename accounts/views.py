import logging

from django.conf import settings
from django.http import JsonResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_GET

logger = logging.getLogger(__name__)


# ########################################################
# Authentication
# ########################################################


@require_GET
def sign_in(request):
    """Landing page that hands off to the provider's hosted sign-in."""
    if request.identity.is_authenticated:
        return redirect("home")

    context = {
        "title": "Sign In",
        "hosted_sign_in_url": settings.IDENTITY_PROVIDER["HOSTED_SIGN_IN_URL"],
        "redirect_url": request.build_absolute_uri("/"),
    }
    return render(request, "accounts/sign_in.html", context)


@require_GET
def auth_test(request):
    """Report whether the request carries a valid provider session."""
    try:
        identity = request.identity
        if not identity.is_authenticated:
            return JsonResponse({"error": "Unauthorized"}, status=401)

        return JsonResponse({"success": True, "userId": identity.user_id})
    except Exception:
        logger.exception("Auth test error")
        return JsonResponse({"error": "Authentication failed"}, status=401)
