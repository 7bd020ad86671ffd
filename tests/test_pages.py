import pytest
from django.test import Client

from sms.models import SMSLog

pytestmark = pytest.mark.django_db


# ########################################################
# /admin/sms/test
# ########################################################


def test_sms_test_page_sends_anonymous_users_to_sign_in(client):
    response = client.get("/admin/sms/test")

    assert response.status_code == 302
    assert response["Location"] == "/sign-in"


def test_sms_test_page_sends_non_admins_home(stranger_client):
    response = stranger_client.get("/admin/sms/test")

    assert response.status_code == 302
    assert response["Location"] == "/"


def test_non_admin_sees_access_denied_message(stranger_client):
    response = stranger_client.get("/admin/sms/test", follow=True)

    assert b"School administrator required" in response.content


def test_sms_test_page_renders_for_admin(admin_client):
    response = admin_client.get("/admin/sms/test")

    assert response.status_code == 200
    assert response.context["school_name"] == "Greenwood Academy"
    assert response.context["max_length"] == 160
    labels = [label for label, _text in response.context["samples"]]
    assert labels[0] == "Student Welcome"
    assert b"Welcome to Greenwood Academy!" in response.content
    assert b"/api/sms/send" in response.content


# ########################################################
# Other admin pages
# ########################################################


def test_dashboard_shows_school_counts(admin_client, school, school_class):
    SMSLog.objects.create(phone_number="233241234567", content="Hi", status=SMSLog.SENT, school=school)

    response = admin_client.get("/admin/")

    assert response.status_code == 200
    assert response.context["school_name"] == "Greenwood Academy"
    assert response.context["class_count"] == 1
    assert response.context["account_count"] == 4
    assert response.context["sms_sent_count"] == 1


def test_dashboard_requires_sign_in(client):
    response = client.get("/admin/")

    assert response.status_code == 302
    assert response["Location"] == "/sign-in"


def test_sms_dashboard_lists_only_own_school_logs(admin_client, school, other_school):
    SMSLog.objects.create(phone_number="233200000001", content="Ours", status=SMSLog.SENT, school=school)
    SMSLog.objects.create(phone_number="233200000002", content="Theirs", status=SMSLog.FAILED,
                          school=other_school)

    response = admin_client.get("/admin/sms")

    assert response.status_code == 200
    assert [log.content for log in response.context["logs"]] == ["Ours"]
    assert response.context["failed_count"] == 0


def test_school_navigation_is_in_context(admin_client):
    response = admin_client.get("/admin/")

    assert response.context["current_school"].name == "Greenwood Academy"
    assert "sms_test" in [item["url"] for item in response.context["school_nav_items"]]


# ########################################################
# Public pages
# ########################################################


def test_home_page_offers_sign_in(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.context["is_signed_in"] is False
    assert b"/sign-in" in response.content


def test_home_page_shows_admin(admin_client, admin):
    response = admin_client.get("/")

    assert response.context["admin"] == admin


def test_sign_in_page_links_to_provider(client):
    response = client.get("/sign-in")

    assert response.status_code == 200
    assert response.context["hosted_sign_in_url"] == "https://accounts.schoolhub.test/sign-in"


def test_sign_in_redirects_signed_in_users(admin_client):
    response = admin_client.get("/sign-in")

    assert response.status_code == 302
    assert response["Location"] == "/"


def test_unknown_identity_token_is_anonymous():
    response = Client(HTTP_AUTHORIZATION="Bearer broken").get("/admin/sms/test")

    assert response["Location"] == "/sign-in"


def test_home_page_carries_admin_school_branding(admin_client, school):
    response = admin_client.get("/")

    assert response.context["current_school"] == school
    assert response.context["school_branding"]["name"] == "Greenwood Academy"


def test_school_counts(school, admin, school_class):
    assert school.get_admin_count() == 1
    assert school.get_class_count() == 1
