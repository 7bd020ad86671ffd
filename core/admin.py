from django.contrib import admin
from .models import Grade, SchoolClass


@admin.register(Grade)
class GradeAdmin(admin.ModelAdmin):
    list_display = ("name", "level", "school")
    list_filter = ("school",)


@admin.register(SchoolClass)
class SchoolClassAdmin(admin.ModelAdmin):
    list_display = ("name", "grade", "capacity", "school")
    list_filter = ("school", "grade")
    search_fields = ("name",)
