from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from school.managers import SchoolAwareManager


class Account(models.Model):
    """A ledger account in a school's chart of accounts."""

    ASSET = "ASSET"
    LIABILITY = "LIABILITY"
    EQUITY = "EQUITY"
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"

    TYPE_CHOICES = [
        (ASSET, _("Asset")),
        (LIABILITY, _("Liability")),
        (EQUITY, _("Equity")),
        (INCOME, _("Income")),
        (EXPENSE, _("Expense")),
    ]

    SUB_TYPE_CHOICES = [
        ("CURRENT_ASSET", _("Current Asset")),
        ("FIXED_ASSET", _("Fixed Asset")),
        ("CURRENT_LIABILITY", _("Current Liability")),
        ("LONG_TERM_LIABILITY", _("Long-term Liability")),
        ("OWNERS_EQUITY", _("Owner's Equity")),
        ("RETAINED_EARNINGS", _("Retained Earnings")),
        ("OPERATING_INCOME", _("Operating Income")),
        ("NON_OPERATING_INCOME", _("Non-operating Income")),
        ("OPERATING_EXPENSE", _("Operating Expense")),
        ("NON_OPERATING_EXPENSE", _("Non-operating Expense")),
    ]

    # Sub-types allowed for each account type
    SUB_TYPES = {
        ASSET: ("CURRENT_ASSET", "FIXED_ASSET"),
        LIABILITY: ("CURRENT_LIABILITY", "LONG_TERM_LIABILITY"),
        EQUITY: ("OWNERS_EQUITY", "RETAINED_EARNINGS"),
        INCOME: ("OPERATING_INCOME", "NON_OPERATING_INCOME"),
        EXPENSE: ("OPERATING_EXPENSE", "NON_OPERATING_EXPENSE"),
    }

    code = models.CharField(max_length=20)
    name = models.CharField(max_length=100)
    type = models.CharField(max_length=10, choices=TYPE_CHOICES)
    sub_type = models.CharField(max_length=25, choices=SUB_TYPE_CHOICES)
    description = models.TextField(blank=True)
    is_active = models.BooleanField(default=True)
    school = models.ForeignKey("school.School", on_delete=models.CASCADE, related_name="accounts")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = SchoolAwareManager()

    class Meta:
        verbose_name = _("Account")
        verbose_name_plural = _("Accounts")
        unique_together = ["code", "school"]
        ordering = ["code"]

    def __str__(self):
        return f"{self.code} - {self.name}"

    def clean(self):
        from django.core.exceptions import ValidationError

        if self.sub_type not in self.SUB_TYPES.get(self.type, ()):
            raise ValidationError({"sub_type": _("Sub-type does not match the account type.")})


class Transaction(models.Model):
    DEBIT = "DEBIT"
    CREDIT = "CREDIT"

    ENTRY_TYPE_CHOICES = [
        (DEBIT, _("Debit")),
        (CREDIT, _("Credit")),
    ]

    account = models.ForeignKey(Account, on_delete=models.PROTECT, related_name="transactions")
    amount = models.DecimalField(max_digits=12, decimal_places=2)
    entry_type = models.CharField(max_length=6, choices=ENTRY_TYPE_CHOICES)
    description = models.CharField(max_length=255, blank=True)
    reference = models.CharField(max_length=100, blank=True)
    date = models.DateField(default=timezone.localdate)
    school = models.ForeignKey("school.School", on_delete=models.CASCADE, related_name="transactions")

    created_at = models.DateTimeField(auto_now_add=True)

    objects = SchoolAwareManager()

    class Meta:
        ordering = ["-date", "-created_at"]

    def __str__(self):
        return f"{self.get_entry_type_display()} {self.amount} ({self.account.code})"
