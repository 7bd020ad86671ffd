from django.urls import path

from .views import result_approvals

urlpatterns = [
    path("result-approvals", result_approvals, name="result_approvals"),
]
