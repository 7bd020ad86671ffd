import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("core", "0001_initial"),
        ("school", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Subject",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100)),
                ("school", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="subjects", to="school.school")),
            ],
            options={
                "ordering": ["name"],
                "unique_together": {("name", "school")},
            },
        ),
        migrations.CreateModel(
            name="Exam",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200)),
                ("start_time", models.DateTimeField()),
                ("end_time", models.DateTimeField()),
                ("term", models.CharField(choices=[("FIRST", "First Term"), ("SECOND", "Second Term"), ("THIRD", "Third Term"), ("FINAL", "Final Term")], max_length=10)),
                ("max_points", models.PositiveIntegerField(default=100, validators=[django.core.validators.MinValueValidator(1)])),
                ("school", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="exams", to="school.school")),
                ("school_class", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="exams", to="core.schoolclass", verbose_name="Class")),
                ("subject", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="exams", to="course.subject")),
            ],
            options={
                "ordering": ["-start_time"],
            },
        ),
    ]
