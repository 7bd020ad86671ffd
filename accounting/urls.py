from django.urls import path

from .views import delete_account_view

urlpatterns = [
    path("delete", delete_account_view, name="delete_account"),
]
