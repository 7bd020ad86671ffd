from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _

from school.managers import SchoolAwareManager


class ResultApproval(models.Model):
    """
    Release gate for exam results, one row per (class, term, school).
    Results stay hidden until a row exists with ``is_approved`` set.
    """
    school_class = models.ForeignKey(
        "core.SchoolClass", on_delete=models.CASCADE, related_name="result_approvals",
        verbose_name=_("Class")
    )
    term = models.CharField(max_length=10, choices=settings.TERM_CHOICES)
    school = models.ForeignKey("school.School", on_delete=models.CASCADE, related_name="result_approvals")
    is_approved = models.BooleanField(default=False)
    approved_by = models.CharField(max_length=64, blank=True, help_text=_("Identity provider user id"))
    approved_at = models.DateTimeField(null=True, blank=True)
    notes = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = SchoolAwareManager()

    class Meta:
        verbose_name = _("Result Approval")
        verbose_name_plural = _("Result Approvals")
        unique_together = ["school_class", "term", "school"]

    def __str__(self):
        status = "approved" if self.is_approved else "pending"
        return f"{self.school_class} - {self.get_term_display()} ({status})"
