from django.db import models
from django.db.models.query import QuerySet


class SchoolAwareQuerySet(QuerySet):
    """QuerySet that filters by school when available"""

    def for_school(self, school):
        """Filter queryset for a specific school"""
        return self.filter(school=school)

    def active(self):
        """Filter for active records"""
        return self.filter(is_active=True)


class SchoolAwareManager(models.Manager):
    """Manager that provides school-aware querysets"""

    def get_queryset(self):
        return SchoolAwareQuerySet(self.model, using=self._db)

    def for_school(self, school):
        """Get records for a specific school"""
        return self.get_queryset().for_school(school)

    def active(self):
        """Get active records"""
        return self.get_queryset().active()
