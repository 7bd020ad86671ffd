from django.conf import settings
import django_filters

from core.models import SchoolClass
from .models import Exam, Subject


class ExamFilter(django_filters.FilterSet):
    term = django_filters.ChoiceFilter(choices=settings.TERM_CHOICES, empty_label="All Terms", label="")
    subject = django_filters.ModelChoiceFilter(queryset=Subject.objects.none(), label="Subject")
    school_class = django_filters.ModelChoiceFilter(queryset=SchoolClass.objects.none(), label="Class")
    title = django_filters.CharFilter(lookup_expr="icontains", label="")

    class Meta:
        model = Exam
        fields = ["term", "subject", "school_class", "title"]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        school = getattr(self.request, "school", None) if self.request else None
        if school is not None:
            self.filters["subject"].queryset = Subject.objects.for_school(school)
            self.filters["school_class"].queryset = SchoolClass.objects.for_school(school)

        # Change html classes and placeholders
        self.filters["title"].field.widget.attrs.update(
            {"class": "au-input", "placeholder": "Exam title"}
        )
        for name in ("term", "subject", "school_class"):
            self.filters[name].field.widget.attrs.update({"class": "au-input"})
