from django.contrib import admin
from .models import School


@admin.register(School)
class SchoolAdmin(admin.ModelAdmin):
    list_display = ("name", "slug", "email", "is_active", "get_admin_count", "get_class_count", "created_at")
    list_filter = ("is_active",)
    search_fields = ("name", "email")
    prepopulated_fields = {"slug": ("name",)}
