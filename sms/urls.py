from django.urls import path

from .views import sms_dashboard, sms_test

urlpatterns = [
    path("sms", sms_dashboard, name="sms_dashboard"),
    path("sms/test", sms_test, name="sms_test"),
]
