import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("statuses", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="RestaurantTable",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "label",
                    models.CharField(
                        help_text="Unique, case-sensitive label shown to staff, e.g. 'T1' or 'Patio 3'.",
                        max_length=100,
                        unique=True,
                    ),
                ),
                ("seats", models.PositiveIntegerField(help_text="Seating capacity.")),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "status",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="tables",
                        to="statuses.tablestatus",
                    ),
                ),
            ],
            options={
                "ordering": ["label"],
                "indexes": [models.Index(fields=["is_active", "label"], name="table_active_label_idx")],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("seats__gte", 1)), name="restaurant_table_seats_positive"
                    )
                ],
            },
        ),
    ]
