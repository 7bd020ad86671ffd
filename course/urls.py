from django.urls import path

from .views import ExamFilterView

urlpatterns = [
    path("exams", ExamFilterView.as_view(), name="exam_list"),
]
