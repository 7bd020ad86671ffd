from django.apps import AppConfig


class AccountingConfig(AppConfig):
    name = "accounting"

    def ready(self) -> None:
        from django.db.models.signals import post_save
        from school.models import School
        from .signals import create_default_accounts

        post_save.connect(create_default_accounts, sender=School)

        return super().ready()
