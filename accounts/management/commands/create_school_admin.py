from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from accounts.models import Admin
from school.models import School


class Command(BaseCommand):
    help = "Create a school and link an identity provider user to it as admin"

    def add_arguments(self, parser):
        parser.add_argument("--school-name", type=str, required=True, help="Name of the school")
        parser.add_argument("--user-id", type=str, required=True, help="Identity provider user id")
        parser.add_argument("--username", type=str, default="", help="Admin username (defaults to the user id)")
        parser.add_argument("--email", type=str, default="", help="Admin email")

    def handle(self, *args, **options):
        school_name = options["school_name"]
        user_id = options["user_id"]
        username = options["username"] or user_id
        email = options["email"] or None

        with transaction.atomic():
            school, created = School.objects.get_or_create(name=school_name)
            if created:
                self.stdout.write(self.style.SUCCESS(f'School "{school.name}" created'))
            else:
                self.stdout.write(self.style.WARNING(f'School "{school.name}" already exists'))

            admin = Admin.objects.filter(pk=user_id).first()
            if admin is not None and admin.school_id != school.pk:
                raise CommandError(
                    f'User "{user_id}" is already an admin of "{admin.school.name}"'
                )
            if admin is None:
                Admin.objects.create(id=user_id, username=username, email=email, school=school)
                self.stdout.write(self.style.SUCCESS(f'Admin "{username}" created for {school.name}'))
            else:
                self.stdout.write(self.style.WARNING(f'Admin "{admin.username}" already exists'))
