from django.urls import path

from .views import auth_test

urlpatterns = [
    path("test", auth_test, name="auth_test"),
]
