from django.db import models
from django.utils.translation import gettext_lazy as _

from school.managers import SchoolAwareManager


class SMSLog(models.Model):
    """Record of every outgoing SMS attempt, successful or not."""

    TYPE_CHOICES = [
        ("MANUAL", _("Manual")),
        ("WELCOME", _("Welcome")),
        ("PAYMENT", _("Payment")),
        ("ANNOUNCEMENT", _("Announcement")),
        ("EVENT", _("Event")),
        ("ATTENDANCE", _("Attendance")),
        ("EXAM_REMINDER", _("Exam Reminder")),
    ]

    SENT = "SENT"
    FAILED = "FAILED"

    STATUS_CHOICES = [
        (SENT, _("Sent")),
        (FAILED, _("Failed")),
    ]

    phone_number = models.CharField(max_length=20)
    content = models.TextField()
    type = models.CharField(max_length=20, choices=TYPE_CHOICES, default="MANUAL")
    status = models.CharField(max_length=10, choices=STATUS_CHOICES)
    sent_by = models.CharField(max_length=64, help_text=_("Identity provider user id"))
    recipient_id = models.CharField(max_length=64, blank=True)
    message_id = models.CharField(max_length=100, blank=True)
    error_message = models.TextField(blank=True)
    school = models.ForeignKey(
        "school.School", on_delete=models.SET_NULL, null=True, blank=True, related_name="sms_logs"
    )

    created_at = models.DateTimeField(auto_now_add=True)

    objects = SchoolAwareManager()

    class Meta:
        verbose_name = _("SMS Log")
        verbose_name_plural = _("SMS Logs")
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.phone_number} [{self.status}]"
