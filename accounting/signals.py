from .services import ensure_default_accounts


def create_default_accounts(sender, instance, created, **kwargs):
    """Give every new school its default chart of accounts."""
    if created:
        ensure_default_accounts(instance)
