from django.contrib import admin
from .models import Account, Transaction


@admin.register(Account)
class AccountAdmin(admin.ModelAdmin):
    list_display = ("code", "name", "type", "sub_type", "is_active", "school")
    list_filter = ("school", "type", "is_active")
    search_fields = ("code", "name")


@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    list_display = ("date", "account", "entry_type", "amount", "reference", "school")
    list_filter = ("school", "entry_type")
    search_fields = ("reference", "description")
