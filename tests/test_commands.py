from io import StringIO

import pytest
from django.core.management import CommandError, call_command

from accounting.models import Account
from accounts.models import Admin
from school.models import School

pytestmark = pytest.mark.django_db


def run(**options):
    out = StringIO()
    call_command("create_school_admin", stdout=out, **options)
    return out.getvalue()


def test_creates_school_and_admin():
    output = run(school_name="Hilltop School", user_id="user_42", email="head@hilltop.test")

    school = School.objects.get(name="Hilltop School")
    admin = Admin.objects.get(pk="user_42")
    assert admin.school == school
    assert admin.username == "user_42"
    assert admin.email == "head@hilltop.test"
    assert Account.objects.for_school(school).count() == 4
    assert 'School "Hilltop School" created' in output


def test_is_safe_to_rerun():
    run(school_name="Hilltop School", user_id="user_42", username="hilltop")
    output = run(school_name="Hilltop School", user_id="user_42", username="hilltop")

    assert School.objects.count() == 1
    assert Admin.objects.count() == 1
    assert "already exists" in output


def test_refuses_to_move_admin_between_schools():
    run(school_name="Hilltop School", user_id="user_42")

    with pytest.raises(CommandError):
        run(school_name="Valley School", user_id="user_42")

    assert not School.objects.filter(name="Valley School").exists()
