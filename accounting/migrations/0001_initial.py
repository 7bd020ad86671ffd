import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("school", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Account",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("code", models.CharField(max_length=20)),
                ("name", models.CharField(max_length=100)),
                ("type", models.CharField(choices=[("ASSET", "Asset"), ("LIABILITY", "Liability"), ("EQUITY", "Equity"), ("INCOME", "Income"), ("EXPENSE", "Expense")], max_length=10)),
                ("sub_type", models.CharField(choices=[("CURRENT_ASSET", "Current Asset"), ("FIXED_ASSET", "Fixed Asset"), ("CURRENT_LIABILITY", "Current Liability"), ("LONG_TERM_LIABILITY", "Long-term Liability"), ("OWNERS_EQUITY", "Owner's Equity"), ("RETAINED_EARNINGS", "Retained Earnings"), ("OPERATING_INCOME", "Operating Income"), ("NON_OPERATING_INCOME", "Non-operating Income"), ("OPERATING_EXPENSE", "Operating Expense"), ("NON_OPERATING_EXPENSE", "Non-operating Expense")], max_length=25)),
                ("description", models.TextField(blank=True)),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("school", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="accounts", to="school.school")),
            ],
            options={
                "verbose_name": "Account",
                "verbose_name_plural": "Accounts",
                "ordering": ["code"],
                "unique_together": {("code", "school")},
            },
        ),
        migrations.CreateModel(
            name="Transaction",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("amount", models.DecimalField(decimal_places=2, max_digits=12)),
                ("entry_type", models.CharField(choices=[("DEBIT", "Debit"), ("CREDIT", "Credit")], max_length=6)),
                ("description", models.CharField(blank=True, max_length=255)),
                ("reference", models.CharField(blank=True, max_length=100)),
                ("date", models.DateField(default=django.utils.timezone.localdate)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("account", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="transactions", to="accounting.account")),
                ("school", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="transactions", to="school.school")),
            ],
            options={
                "ordering": ["-date", "-created_at"],
            },
        ),
    ]
