import logging

from django.conf import settings
from django.utils import timezone

from .models import ResultApproval

logger = logging.getLogger(__name__)

VALID_TERMS = [value for value, _label in settings.TERM_CHOICES]


def check_result_approval(class_id, term, school_id):
    """
    Return True only if results for the class and term have been approved.

    Missing rows and lookup errors both count as "not approved"; errors are
    logged and never raised to the caller.
    """
    try:
        approval = ResultApproval.objects.filter(
            school_class_id=class_id,
            term=term,
            school_id=school_id,
        ).first()
    except Exception:
        logger.exception("Error checking result approval for class=%s term=%s school=%s",
                         class_id, term, school_id)
        return False

    return bool(approval and approval.is_approved)


def set_result_approval(school, school_class, term, is_approved, approved_by="", notes=""):
    """Create or update the approval row for ``school_class`` and ``term``."""
    approval, _created = ResultApproval.objects.update_or_create(
        school_class=school_class,
        term=term,
        school=school,
        defaults={
            "is_approved": is_approved,
            "approved_by": approved_by if is_approved else "",
            "approved_at": timezone.now() if is_approved else None,
            "notes": notes or "",
        },
    )
    return approval


def serialize_approval(school_class, term, approval=None):
    return {
        "id": approval.pk if approval else 0,
        "classId": school_class.pk,
        "className": school_class.name,
        "gradeName": school_class.grade.name,
        "term": term,
        "isApproved": approval.is_approved if approval else False,
        "approvedBy": (approval.approved_by or None) if approval else None,
        "approvedAt": approval.approved_at.isoformat() if approval and approval.approved_at else None,
        "notes": (approval.notes or None) if approval else None,
    }
