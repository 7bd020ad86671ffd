from django.contrib import admin
from django.db import models
from django.utils.translation import gettext_lazy as _
from django.utils.text import slugify

from core.images import validate_remote_image_url


class School(models.Model):
    name = models.CharField(max_length=200, unique=True, help_text=_("Name of the school"))
    slug = models.SlugField(max_length=200, unique=True, help_text=_("Unique identifier for the school"))
    email = models.EmailField(blank=True, null=True)
    address = models.TextField(blank=True, null=True)
    phone = models.CharField(max_length=20, blank=True, null=True)
    logo_url = models.URLField(
        blank=True, null=True,
        validators=[validate_remote_image_url],
        help_text=_("Hosted logo image (pexels, cloudinary or canva)")
    )

    # School status
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("School")
        verbose_name_plural = _("Schools")
        ordering = ["name"]

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)
        super().save(*args, **kwargs)

    @admin.display(description=_("Admins"))
    def get_admin_count(self):
        return self.admins.count()

    @admin.display(description=_("Classes"))
    def get_class_count(self):
        return self.classes.count()
