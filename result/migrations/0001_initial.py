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
            name="ResultApproval",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("term", models.CharField(choices=[("FIRST", "First Term"), ("SECOND", "Second Term"), ("THIRD", "Third Term"), ("FINAL", "Final Term")], max_length=10)),
                ("is_approved", models.BooleanField(default=False)),
                ("approved_by", models.CharField(blank=True, help_text="Identity provider user id", max_length=64)),
                ("approved_at", models.DateTimeField(blank=True, null=True)),
                ("notes", models.TextField(blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("school", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="result_approvals", to="school.school")),
                ("school_class", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="result_approvals", to="core.schoolclass", verbose_name="Class")),
            ],
            options={
                "verbose_name": "Result Approval",
                "verbose_name_plural": "Result Approvals",
                "unique_together": {("school_class", "term", "school")},
            },
        ),
    ]
