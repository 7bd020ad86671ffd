from django.db import models
from django.utils.translation import gettext_lazy as _

from school.managers import SchoolAwareManager


class AdminManager(SchoolAwareManager):

    def for_identity(self, identity):
        """Return the Admin for an authenticated identity, or None."""
        if not identity.is_authenticated:
            return None
        return self.get_queryset().select_related("school").filter(pk=identity.user_id).first()


class Admin(models.Model):
    """
    A school administrator. The primary key is the user id issued by the
    identity provider, so no password or session data is stored here.
    """
    id = models.CharField(primary_key=True, max_length=64, help_text=_("Identity provider user id"))
    username = models.CharField(max_length=150, unique=True)
    name = models.CharField(max_length=100, blank=True)
    surname = models.CharField(max_length=100, blank=True)
    email = models.EmailField(blank=True, null=True)
    phone = models.CharField(max_length=20, blank=True, null=True)
    school = models.ForeignKey("school.School", on_delete=models.CASCADE, related_name="admins")

    created_at = models.DateTimeField(auto_now_add=True)

    objects = AdminManager()

    class Meta:
        verbose_name = _("Admin")
        verbose_name_plural = _("Admins")
        ordering = ["username"]

    def __str__(self):
        return self.get_full_name or self.username

    @property
    def get_full_name(self):
        return " ".join(part for part in (self.name, self.surname) if part)
