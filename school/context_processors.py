from django.conf import settings

from .utils import get_current_school


def school_context(request):
    """
    Add school information to template context for tenant-aware branding
    """
    context = {}

    school = get_current_school(request)
    if school:
        context["current_school"] = school
        context["school_branding"] = {
            "name": school.name,
            "logo_url": school.logo_url,
        }

        context["school_nav_items"] = [
            {"name": "Dashboard", "url": "dashboard", "icon": "tachometer-alt"},
            {"name": "Exams", "url": "exam_list", "icon": "book"},
            {"name": "SMS", "url": "sms_dashboard", "icon": "sms"},
            {"name": "SMS Test", "url": "sms_test", "icon": "paper-plane"},
        ]

    # Add global context
    context["site_name"] = getattr(settings, "SITE_NAME", "SchoolHub")
    context["site_description"] = getattr(settings, "SITE_DESCRIPTION", "School Management System")

    return context
