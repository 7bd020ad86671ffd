from django.conf import settings
from django.utils.decorators import method_decorator
from django_filters.views import FilterView

from accounts.decorators import admin_required
from result.services import check_result_approval
from .filters import ExamFilter
from .models import Exam


@method_decorator(admin_required, name="dispatch")
class ExamFilterView(FilterView):
    filterset_class = ExamFilter
    template_name = "course/exam_list.html"
    paginate_by = settings.ITEMS_PER_PAGE

    def get_queryset(self):
        return Exam.objects.for_school(self.request.school).select_related("subject", "school_class")

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["title"] = "Exams"
        context["exam_rows"] = [
            {
                "exam": exam,
                "results_approved": check_result_approval(exam.school_class_id, exam.term, exam.school_id),
            }
            for exam in context["object_list"]
        ]
        return context
