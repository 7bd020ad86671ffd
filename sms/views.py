import json
import logging

from django.http import JsonResponse
from django.http.request import RawPostDataException
from django.shortcuts import render
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST

from accounts.decorators import admin_required, session_csrf_failed
from accounts.models import Admin
from .messages import sample_messages
from .models import SMSLog
from .services import SMSService, format_sender_name, normalize_phone_number

logger = logging.getLogger(__name__)

MAX_SMS_LENGTH = 160

# E.164 allows at most 15 digits
MIN_PHONE_DIGITS = 7
MAX_PHONE_DIGITS = 15

MESSAGE_TYPES = {value for value, _label in SMSLog.TYPE_CHOICES}


# ########################################################
# Pages
# ########################################################


@require_GET
@admin_required
def sms_dashboard(request):
    logs = SMSLog.objects.for_school(request.school)[:50]
    context = {
        "title": "SMS",
        "logs": logs,
        "sent_count": SMSLog.objects.for_school(request.school).filter(status=SMSLog.SENT).count(),
        "failed_count": SMSLog.objects.for_school(request.school).filter(status=SMSLog.FAILED).count(),
    }
    return render(request, "sms/dashboard.html", context)


@require_GET
@admin_required
def sms_test(request):
    school_name = request.admin.school.name
    context = {
        "title": "SMS Test",
        "school_name": school_name,
        "samples": sample_messages(school_name),
        "max_length": MAX_SMS_LENGTH,
    }
    return render(request, "sms/test.html", context)


# ########################################################
# API
# ########################################################


def _resolve_sender(user_id):
    """Sender id from the caller's school, "School" if they have none."""
    try:
        admin = Admin.objects.select_related("school").filter(pk=user_id).first()
    except Exception:
        logger.exception("Error getting school name")
        return "SchoolApp", None

    if admin and admin.school and admin.school.name:
        return format_sender_name(admin.school.name), admin.school
    return "School", None


@csrf_exempt
@require_POST
def sms_send(request):
    try:
        if session_csrf_failed(request):
            return JsonResponse({"error": "CSRF verification failed"}, status=403)

        identity = request.identity
        if not identity.is_authenticated:
            return JsonResponse({"error": "Unauthorized"}, status=401)

        try:
            body = json.loads(request.body or b"{}")
        except (ValueError, RawPostDataException):
            return JsonResponse({"error": "Invalid JSON body"}, status=400)
        if not isinstance(body, dict):
            return JsonResponse({"error": "Invalid JSON body"}, status=400)

        to = body.get("to")
        content = body.get("content")
        if not to or not content:
            return JsonResponse({"error": "Phone number and content are required"}, status=400)

        # Everything stored in the log is checked before the message goes out
        phone_number = normalize_phone_number(str(to))
        if not MIN_PHONE_DIGITS <= len(phone_number) <= MAX_PHONE_DIGITS:
            return JsonResponse({"error": "Invalid phone number"}, status=400)

        message_type = body.get("type") or "MANUAL"
        if message_type not in MESSAGE_TYPES:
            return JsonResponse({"error": "Invalid message type"}, status=400)

        recipient_id = str(body.get("recipientId") or "")
        if len(recipient_id) > SMSLog._meta.get_field("recipient_id").max_length:
            return JsonResponse({"error": "Invalid recipient id"}, status=400)

        sender = body.get("from")
        school = None
        if sender:
            admin = Admin.objects.select_related("school").filter(pk=identity.user_id).first()
            school = admin.school if admin else None
        else:
            sender, school = _resolve_sender(identity.user_id)

        result = SMSService.send_sms(phone_number, content, sender)

        SMSLog.objects.create(
            phone_number=phone_number,
            content=content,
            type=message_type,
            status=SMSLog.SENT if result.success else SMSLog.FAILED,
            sent_by=identity.user_id,
            recipient_id=recipient_id,
            message_id=result.message_id or "",
            error_message="" if result.success else result.message,
            school=school,
        )

        return JsonResponse(result.as_dict())
    except Exception:
        logger.exception("SMS API error")
        return JsonResponse({"error": "Internal server error"}, status=500)
