import logging
from dataclasses import dataclass

from django.db import transaction

from school.utils import get_request_admin
from .models import Account

logger = logging.getLogger(__name__)

# Accounts every school needs for automatic fee and payroll postings
DEFAULT_ACCOUNTS = [
    {
        "code": "1001",
        "name": "Cash",
        "type": Account.ASSET,
        "sub_type": "CURRENT_ASSET",
        "description": "Cash on hand",
    },
    {
        "code": "1002",
        "name": "Bank Account",
        "type": Account.ASSET,
        "sub_type": "CURRENT_ASSET",
        "description": "Bank account balance",
    },
    {
        "code": "4001",
        "name": "Student Fee Income",
        "type": Account.INCOME,
        "sub_type": "OPERATING_INCOME",
        "description": "Income from student fees and tuition",
    },
    {
        "code": "5001",
        "name": "Salary Expense",
        "type": Account.EXPENSE,
        "sub_type": "OPERATING_EXPENSE",
        "description": "Staff salary payments",
    },
]


@dataclass
class ActionResult:
    success: bool
    message: str = ""


def ensure_default_accounts(school):
    """Create the default accounts for ``school``; existing ones are left untouched."""
    for data in DEFAULT_ACCOUNTS:
        defaults = {key: value for key, value in data.items() if key != "code"}
        Account.objects.get_or_create(code=data["code"], school=school, defaults=defaults)


def delete_account(request, data):
    """
    Delete the ledger account whose id is in ``data`` for the requesting
    admin's school. Returns an ``ActionResult``; only unexpected errors raise.
    """
    admin = get_request_admin(request)
    if admin is None:
        return ActionResult(False, "Not authorized")

    try:
        account_id = int(data.get("id"))
    except (TypeError, ValueError):
        return ActionResult(False, "Invalid account id")

    with transaction.atomic():
        account = Account.objects.for_school(admin.school).select_for_update().filter(pk=account_id).first()
        if account is None:
            return ActionResult(False, "Account not found")
        if account.transactions.exists():
            return ActionResult(False, "Cannot delete an account that has transactions")
        account.delete()

    logger.info("Account %s deleted by admin %s", account_id, admin.pk)
    return ActionResult(True)
