from django.shortcuts import render
from django.views.decorators.http import require_GET

from accounts.decorators import admin_required
from accounting.models import Account
from course.models import Exam
from school.utils import get_request_admin
from sms.models import SMSLog
from .models import SchoolClass


@require_GET
def home_view(request):
    admin = get_request_admin(request) if request.identity.is_authenticated else None
    context = {
        "title": "Home",
        "is_signed_in": request.identity.is_authenticated,
        "admin": admin,
    }
    return render(request, "core/index.html", context)


@require_GET
@admin_required
def dashboard_view(request):
    school = request.school
    context = {
        "title": "Dashboard",
        "school_name": school.name,
        "class_count": SchoolClass.objects.for_school(school).count(),
        "exam_count": Exam.objects.for_school(school).count(),
        "account_count": Account.objects.for_school(school).active().count(),
        "sms_sent_count": SMSLog.objects.for_school(school).filter(status=SMSLog.SENT).count(),
    }
    return render(request, "core/dashboard.html", context)
