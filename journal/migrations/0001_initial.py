import django.db.models.deletion
import analytics.config
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="DailyJournal",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("guest_session_id", models.CharField(blank=True, max_length=64, null=True)),
                ("date", models.DateField(default=analytics.config.local_today)),
                ("content", models.TextField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "user",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="daily_journals",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["-date"],
            },
        ),
        migrations.AddConstraint(
            model_name="dailyjournal",
            constraint=models.CheckConstraint(
                condition=models.Q(
                    models.Q(("guest_session_id__isnull", True), ("user__isnull", False)),
                    models.Q(("guest_session_id__isnull", False), ("user__isnull", True)),
                    _connector="OR",
                ),
                name="daily_journal_single_owner",
            ),
        ),
        migrations.AddConstraint(
            model_name="dailyjournal",
            constraint=models.UniqueConstraint(
                condition=models.Q(("user__isnull", False)),
                fields=("user", "date"),
                name="daily_journal_unique_user_date",
            ),
        ),
        migrations.AddConstraint(
            model_name="dailyjournal",
            constraint=models.UniqueConstraint(
                condition=models.Q(("guest_session_id__isnull", False)),
                fields=("guest_session_id", "date"),
                name="daily_journal_unique_guest_date",
            ),
        ),
    ]
