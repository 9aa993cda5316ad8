from django.db import migrations

DEFAULT_STATUSES = {
    "OrderStatus": [
        ("NEW", "New"),
        ("IN_PROGRESS", "In progress"),
        ("SERVED", "Served"),
        ("PAID", "Paid"),
        ("CANCELLED", "Cancelled"),
    ],
    "TableStatus": [
        ("AVAILABLE", "Available"),
        ("OCCUPIED", "Occupied"),
        ("RESERVED", "Reserved"),
        ("OUT_OF_SERVICE", "Out of service"),
    ],
    "ReservationStatus": [
        ("PENDING", "Pending"),
        ("CONFIRMED", "Confirmed"),
        ("CANCELLED", "Cancelled"),
        ("COMPLETED", "Completed"),
    ],
}


def seed_statuses(apps, schema_editor):
    for model_name, rows in DEFAULT_STATUSES.items():
        model = apps.get_model("statuses", model_name)
        for name, description in rows:
            model.objects.get_or_create(name=name, defaults={"description": description})


class Migration(migrations.Migration):

    dependencies = [
        ("statuses", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(seed_statuses, migrations.RunPython.noop),
    ]
