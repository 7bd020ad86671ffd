from django.contrib import admin
from .models import ResultApproval


@admin.register(ResultApproval)
class ResultApprovalAdmin(admin.ModelAdmin):
    list_display = ("school_class", "term", "school", "is_approved", "approved_by", "approved_at")
    list_filter = ("school", "term", "is_approved")
