from django.contrib import admin
from .models import Exam, Subject


@admin.register(Subject)
class SubjectAdmin(admin.ModelAdmin):
    list_display = ("name", "school")
    list_filter = ("school",)
    search_fields = ("name",)


@admin.register(Exam)
class ExamAdmin(admin.ModelAdmin):
    list_display = ("title", "subject", "school_class", "term", "start_time", "school")
    list_filter = ("school", "term")
    search_fields = ("title",)
