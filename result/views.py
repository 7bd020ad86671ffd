import json
import logging

from django.http import JsonResponse
from django.http.request import RawPostDataException
from django.http.multipartparser import MultiPartParserError
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from accounts.decorators import api_admin_required, session_csrf_failed
from core.models import SchoolClass
from .models import ResultApproval
from .services import VALID_TERMS, serialize_approval, set_result_approval

logger = logging.getLogger(__name__)


@csrf_exempt
@require_http_methods(["GET", "POST"])
@api_admin_required(forbidden="Not authorized to manage result approvals")
def result_approvals(request):
    if request.method == "POST":
        return _update_approval(request)
    return _list_approvals(request)


def _list_approvals(request):
    """One entry per class of the school, with its approval state for the term."""
    term = request.GET.get("term")
    if not term:
        return JsonResponse({"error": "Term is required"}, status=400)
    if term not in VALID_TERMS:
        return JsonResponse({"error": "Invalid term value"}, status=400)

    try:
        classes = SchoolClass.objects.for_school(request.school).select_related("grade").order_by("name")
        approvals = {
            a.school_class_id: a
            for a in ResultApproval.objects.for_school(request.school).filter(term=term)
        }
        data = [serialize_approval(c, term, approvals.get(c.pk)) for c in classes]
    except Exception:
        logger.exception("Error fetching result approvals")
        return JsonResponse({"error": "Failed to fetch result approvals"}, status=500)

    return JsonResponse(data, safe=False)


def _update_approval(request):
    try:
        csrf_failed = session_csrf_failed(request)
    except MultiPartParserError:
        return JsonResponse({"error": "Invalid JSON body"}, status=400)
    if csrf_failed:
        return JsonResponse({"error": "CSRF verification failed"}, status=403)

    try:
        payload = json.loads(request.body or b"{}")
    except (ValueError, RawPostDataException):
        return JsonResponse({"error": "Invalid JSON body"}, status=400)
    if not isinstance(payload, dict):
        return JsonResponse({"error": "Invalid JSON body"}, status=400)

    class_id = payload.get("classId")
    term = payload.get("term")
    is_approved = payload.get("isApproved")
    notes = payload.get("notes") or ""

    if not class_id or not term or not isinstance(is_approved, bool):
        return JsonResponse({"error": "Class ID, term, and approval status are required"}, status=400)
    if term not in VALID_TERMS:
        return JsonResponse({"error": "Invalid term value"}, status=400)
    try:
        class_id = int(class_id)
    except (TypeError, ValueError):
        return JsonResponse({"error": "Invalid class ID"}, status=400)

    try:
        school_class = (
            SchoolClass.objects.for_school(request.school)
            .select_related("grade")
            .filter(pk=class_id)
            .first()
        )
        if school_class is None:
            return JsonResponse({"error": "Class not found or not accessible"}, status=404)

        approval = set_result_approval(
            request.school,
            school_class,
            term,
            is_approved,
            approved_by=request.admin.pk,
            notes=notes,
        )
    except Exception:
        logger.exception("Error managing result approval")
        return JsonResponse({"error": "Failed to manage result approval"}, status=500)

    return JsonResponse({"success": True, "approval": serialize_approval(school_class, term, approval)})
