from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

from school.managers import SchoolAwareManager


class Subject(models.Model):
    name = models.CharField(max_length=100)
    school = models.ForeignKey("school.School", on_delete=models.CASCADE, related_name="subjects")

    objects = SchoolAwareManager()

    class Meta:
        unique_together = ["name", "school"]
        ordering = ["name"]

    def __str__(self):
        return self.name


class Exam(models.Model):
    title = models.CharField(max_length=200)
    start_time = models.DateTimeField()
    end_time = models.DateTimeField()
    term = models.CharField(max_length=10, choices=settings.TERM_CHOICES)
    max_points = models.PositiveIntegerField(default=100, validators=[MinValueValidator(1)])
    subject = models.ForeignKey(Subject, on_delete=models.CASCADE, related_name="exams")
    school_class = models.ForeignKey(
        "core.SchoolClass", on_delete=models.CASCADE, related_name="exams",
        verbose_name=_("Class")
    )
    school = models.ForeignKey("school.School", on_delete=models.CASCADE, related_name="exams")

    objects = SchoolAwareManager()

    class Meta:
        ordering = ["-start_time"]

    def __str__(self):
        return f"{self.title} ({self.get_term_display()})"

    def clean(self):
        if self.start_time and self.end_time and self.end_time < self.start_time:
            raise ValidationError({"end_time": _("End time cannot be before start time.")})
