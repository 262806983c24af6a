import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("title", models.TextField()),
                ("slug", models.TextField(unique=True)),
                ("description", models.TextField()),
                ("overview", models.TextField()),
                ("image", models.TextField()),
                ("venue", models.TextField()),
                ("location", models.TextField()),
                ("date", models.DateField()),
                ("time", models.TimeField()),
                (
                    "mode",
                    models.CharField(
                        choices=[("online", "Online"), ("offline", "Offline"), ("hybrid", "Hybrid")],
                        max_length=16,
                    ),
                ),
                ("audience", models.TextField()),
                ("agenda", models.JSONField(default=list)),
                ("organizer", models.TextField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["-created_at"], name="events_created_desc_idx")],
            },
        ),
        migrations.CreateModel(
            name="EventTag",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("name", models.TextField()),
                ("position", models.PositiveSmallIntegerField()),
                (
                    "event",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="tags",
                        to="events.event",
                    ),
                ),
            ],
            options={
                "ordering": ["position"],
                "indexes": [models.Index(fields=["name"], name="events_tag_name_idx")],
                "constraints": [models.UniqueConstraint(fields=["event", "name"], name="uniq_event_tag")],
            },
        ),
    ]
