from django.contrib import admin
from .models import SMSLog


@admin.register(SMSLog)
class SMSLogAdmin(admin.ModelAdmin):
    list_display = ("phone_number", "type", "status", "sent_by", "school", "created_at")
    list_filter = ("status", "type", "school")
    search_fields = ("phone_number", "content", "message_id")
    readonly_fields = ("created_at",)
