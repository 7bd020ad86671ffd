import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("school", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="SMSLog",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("phone_number", models.CharField(max_length=20)),
                ("content", models.TextField()),
                ("type", models.CharField(choices=[("MANUAL", "Manual"), ("WELCOME", "Welcome"), ("PAYMENT", "Payment"), ("ANNOUNCEMENT", "Announcement"), ("EVENT", "Event"), ("ATTENDANCE", "Attendance"), ("EXAM_REMINDER", "Exam Reminder")], default="MANUAL", max_length=20)),
                ("status", models.CharField(choices=[("SENT", "Sent"), ("FAILED", "Failed")], max_length=10)),
                ("sent_by", models.CharField(help_text="Identity provider user id", max_length=64)),
                ("recipient_id", models.CharField(blank=True, max_length=64)),
                ("message_id", models.CharField(blank=True, max_length=100)),
                ("error_message", models.TextField(blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("school", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="sms_logs", to="school.school")),
            ],
            options={
                "verbose_name": "SMS Log",
                "verbose_name_plural": "SMS Logs",
                "ordering": ["-created_at"],
            },
        ),
    ]
