import logging

from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from accounts.decorators import session_csrf_failed
from .services import delete_account

logger = logging.getLogger(__name__)


@csrf_exempt
@require_POST
def delete_account_view(request):
    try:
        if session_csrf_failed(request):
            return JsonResponse({"success": False, "message": "CSRF verification failed"}, status=403)

        result = delete_account(request, request.POST)

        if result.success:
            return JsonResponse({"success": True})
        return JsonResponse(
            {"success": False, "message": result.message or "Failed to delete"},
            status=400,
        )
    except Exception:
        logger.exception("Delete account error")
        return JsonResponse(
            {"success": False, "message": "Internal server error"},
            status=500,
        )
