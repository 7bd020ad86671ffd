from django.db import models
from django.utils.translation import gettext_lazy as _

from school.managers import SchoolAwareManager


class Grade(models.Model):
    """A year group (e.g. Grade 1) that classes belong to."""
    level = models.PositiveSmallIntegerField()
    name = models.CharField(max_length=50, blank=True)
    school = models.ForeignKey("school.School", on_delete=models.CASCADE, related_name="grades")

    objects = SchoolAwareManager()

    class Meta:
        unique_together = ["level", "school"]
        ordering = ["level"]

    def __str__(self):
        return self.name or f"Grade {self.level}"

    def save(self, *args, **kwargs):
        if not self.name:
            self.name = f"Grade {self.level}"
        super().save(*args, **kwargs)


class SchoolClass(models.Model):
    name = models.CharField(max_length=50)
    capacity = models.PositiveIntegerField(default=30)
    grade = models.ForeignKey(Grade, on_delete=models.CASCADE, related_name="classes")
    school = models.ForeignKey("school.School", on_delete=models.CASCADE, related_name="classes")

    objects = SchoolAwareManager()

    class Meta:
        verbose_name = _("Class")
        verbose_name_plural = _("Classes")
        unique_together = ["name", "school"]
        ordering = ["name"]

    def __str__(self):
        return self.name
