from django.db import migrations, models


def status_fields():
    return [
        ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
        ("name", models.CharField(max_length=50, unique=True, verbose_name="name")),
        ("description", models.CharField(blank=True, max_length=255, verbose_name="description")),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="OrderStatus",
            fields=status_fields(),
            options={
                "verbose_name": "order status",
                "verbose_name_plural": "order statuses",
                "ordering": ["name"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="ReservationStatus",
            fields=status_fields(),
            options={
                "verbose_name": "reservation status",
                "verbose_name_plural": "reservation statuses",
                "ordering": ["name"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="TableStatus",
            fields=status_fields(),
            options={
                "verbose_name": "table status",
                "verbose_name_plural": "table statuses",
                "ordering": ["name"],
                "abstract": False,
            },
        ),
    ]
