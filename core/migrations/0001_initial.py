import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("school", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Grade",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("level", models.PositiveSmallIntegerField()),
                ("name", models.CharField(blank=True, max_length=50)),
                ("school", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="grades", to="school.school")),
            ],
            options={
                "ordering": ["level"],
                "unique_together": {("level", "school")},
            },
        ),
        migrations.CreateModel(
            name="SchoolClass",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=50)),
                ("capacity", models.PositiveIntegerField(default=30)),
                ("grade", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="classes", to="core.grade")),
                ("school", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="classes", to="school.school")),
            ],
            options={
                "verbose_name": "Class",
                "verbose_name_plural": "Classes",
                "ordering": ["name"],
                "unique_together": {("name", "school")},
            },
        ),
    ]
