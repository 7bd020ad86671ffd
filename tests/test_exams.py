from datetime import timedelta

import pytest
from django.core.exceptions import ValidationError
from django.utils import timezone

from core.models import Grade, SchoolClass
from course.models import Exam, Subject
from result.services import set_result_approval

pytestmark = pytest.mark.django_db

EXAMS_URL = "/list/exams"


@pytest.fixture
def subject(school):
    return Subject.objects.create(name="Mathematics", school=school)


def make_exam(title, term, subject, school_class, school):
    start = timezone.now()
    return Exam.objects.create(
        title=title,
        start_time=start,
        end_time=start + timedelta(hours=2),
        term=term,
        subject=subject,
        school_class=school_class,
        school=school,
    )


def test_exam_list_requires_admin(client, stranger_client):
    assert client.get(EXAMS_URL)["Location"] == "/sign-in"
    assert stranger_client.get(EXAMS_URL)["Location"] == "/"


def test_exam_list_filters_by_term(admin_client, school, subject, school_class):
    make_exam("Maths First Term", "FIRST", subject, school_class, school)
    make_exam("Maths Second Term", "SECOND", subject, school_class, school)

    response = admin_client.get(EXAMS_URL, {"term": "FIRST"})

    assert response.status_code == 200
    titles = [row["exam"].title for row in response.context["exam_rows"]]
    assert titles == ["Maths First Term"]


def test_exam_list_flags_approved_results(admin_client, school, subject, school_class):
    make_exam("Maths Final", "FINAL", subject, school_class, school)
    make_exam("Maths Third", "THIRD", subject, school_class, school)
    set_result_approval(school, school_class, "FINAL", True, approved_by="user_admin_1")

    response = admin_client.get(EXAMS_URL)

    flags = {row["exam"].term: row["results_approved"] for row in response.context["exam_rows"]}
    assert flags == {"FINAL": True, "THIRD": False}
    assert b"Approved" in response.content
    assert b"Pending" in response.content


def test_exam_list_hides_other_schools(admin_client, other_school):
    grade = Grade.objects.create(level=1, school=other_school)
    foreign_class = SchoolClass.objects.create(name="1A", grade=grade, school=other_school)
    foreign_subject = Subject.objects.create(name="Science", school=other_school)
    make_exam("Foreign exam", "FIRST", foreign_subject, foreign_class, other_school)

    response = admin_client.get(EXAMS_URL)

    assert response.context["exam_rows"] == []
    assert b"No exams found." in response.content


def test_exam_end_must_not_precede_start(school, subject, school_class):
    start = timezone.now()
    exam = Exam(
        title="Backwards",
        start_time=start,
        end_time=start - timedelta(minutes=1),
        term="FIRST",
        subject=subject,
        school_class=school_class,
        school=school,
    )

    with pytest.raises(ValidationError):
        exam.full_clean()


def test_exam_term_is_limited_to_known_terms(school, subject, school_class):
    exam = make_exam("Maths", "FIRST", subject, school_class, school)
    exam.term = "MIDTERM"

    with pytest.raises(ValidationError):
        exam.full_clean()


def test_grade_name_defaults_from_level(school):
    assert Grade.objects.create(level=4, school=school).name == "Grade 4"
