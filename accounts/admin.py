from django.contrib import admin
from .models import Admin


@admin.register(Admin)
class AdminAdmin(admin.ModelAdmin):
    list_display = ("username", "get_full_name", "email", "school", "created_at")
    list_filter = ("school",)
    search_fields = ("id", "username", "email", "name", "surname")
