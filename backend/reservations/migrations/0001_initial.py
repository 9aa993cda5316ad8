import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("statuses", "0001_initial"),
        ("tables", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Reservation",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("full_name", models.CharField(max_length=200)),
                ("party_size", models.PositiveIntegerField()),
                ("phone_number", models.CharField(blank=True, max_length=32, null=True)),
                ("event_datetime", models.DateTimeField(help_text="Exact date and time of the booking.")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "status",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="reservations",
                        to="statuses.reservationstatus",
                    ),
                ),
                (
                    "table",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="reservations",
                        to="tables.restauranttable",
                    ),
                ),
            ],
            options={
                "ordering": ["event_datetime", "id"],
                "indexes": [models.Index(fields=["table", "event_datetime"], name="reservation_table_time_idx")],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("table", "event_datetime"), name="unique_reservation_table_event_datetime"
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("party_size__gte", 1)), name="reservation_party_size_positive"
                    ),
                ],
            },
        ),
    ]
