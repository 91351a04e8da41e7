import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="MoodEntry",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("guest_session_id", models.CharField(blank=True, max_length=64, null=True)),
                (
                    "mood",
                    models.CharField(
                        choices=[
                            ("sad", "Sad"),
                            ("anxious", "Anxious"),
                            ("neutral", "Neutral"),
                            ("happy", "Happy"),
                            ("excited", "Excited"),
                        ],
                        max_length=20,
                    ),
                ),
                ("sub_moods", models.JSONField(blank=True, default=list)),
                (
                    "intensity",
                    models.PositiveSmallIntegerField(
                        validators=[
                            django.core.validators.MinValueValidator(1),
                            django.core.validators.MaxValueValidator(10),
                        ]
                    ),
                ),
                ("notes", models.TextField(blank=True, max_length=500, null=True)),
                ("activities", models.JSONField(blank=True, default=list)),
                ("date", models.DateTimeField(default=django.utils.timezone.now)),
                (
                    "moon_phase",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("new_moon", "New Moon"),
                            ("waxing_crescent", "Waxing Crescent"),
                            ("first_quarter", "First Quarter"),
                            ("waxing_gibbous", "Waxing Gibbous"),
                            ("full_moon", "Full Moon"),
                            ("waning_gibbous", "Waning Gibbous"),
                            ("third_quarter", "Third Quarter"),
                            ("waning_crescent", "Waning Crescent"),
                        ],
                        max_length=20,
                        null=True,
                    ),
                ),
                (
                    "moon_illumination",
                    models.FloatField(
                        blank=True,
                        null=True,
                        validators=[
                            django.core.validators.MinValueValidator(0),
                            django.core.validators.MaxValueValidator(100),
                        ],
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "user",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="mood_entries",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name_plural": "Mood Entries",
                "ordering": ["-date", "-created_at"],
            },
        ),
        migrations.AddIndex(
            model_name="moodentry",
            index=models.Index(fields=["user", "-date"], name="mood_entry_user_date_idx"),
        ),
        migrations.AddIndex(
            model_name="moodentry",
            index=models.Index(fields=["guest_session_id", "-date"], name="mood_entry_guest_date_idx"),
        ),
        migrations.AddConstraint(
            model_name="moodentry",
            constraint=models.CheckConstraint(
                condition=models.Q(
                    models.Q(("guest_session_id__isnull", True), ("user__isnull", False)),
                    models.Q(("guest_session_id__isnull", False), ("user__isnull", True)),
                    _connector="OR",
                ),
                name="mood_entry_single_owner",
            ),
        ),
        migrations.AddConstraint(
            model_name="moodentry",
            constraint=models.CheckConstraint(
                condition=models.Q(("intensity__gte", 1), ("intensity__lte", 10)),
                name="mood_entry_intensity_range",
            ),
        ),
    ]
