import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Beer",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=200, unique=True)),
                ("brand", models.CharField(max_length=200)),
                (
                    "max",
                    models.PositiveIntegerField(
                        validators=[
                            django.core.validators.MinValueValidator(1),
                            django.core.validators.MaxValueValidator(500),
                        ]
                    ),
                ),
                ("quantity", models.PositiveIntegerField(default=0)),
                (
                    "type",
                    models.CharField(
                        choices=[
                            ("LAGER", "Lager"),
                            ("MALZBIER", "Malzbier"),
                            ("WITBIER", "Witbier"),
                            ("WEISS", "Weiss"),
                            ("ALE", "Ale"),
                            ("IPA", "IPA"),
                            ("STOUT", "Stout"),
                        ],
                        max_length=20,
                    ),
                ),
            ],
            options={
                "db_table": "beers",
                "ordering": ["name"],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("quantity__lte", models.F("max"))),
                        name="beers_quantity_within_max",
                    )
                ],
            },
        ),
    ]
