import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Customer",
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
                (
                    "name",
                    models.CharField(
                        max_length=25,
                        validators=[
                            django.core.validators.MinLengthValidator(1),
                            django.core.validators.RegexValidator(
                                "^[A-Za-z\\-']+$",
                                message="Please use a name without numbers or specials",
                            ),
                        ],
                    ),
                ),
                (
                    "email",
                    models.EmailField(
                        error_messages={
                            "invalid": "The email address must be in the format of name@domain.com"
                        },
                        max_length=254,
                        unique=True,
                    ),
                ),
                (
                    "phone_number",
                    models.CharField(
                        db_column="phone_number",
                        max_length=11,
                        validators=[
                            django.core.validators.RegexValidator(
                                "^0[0-9]{10}$", message="^0[0-9]{10}$ format"
                            )
                        ],
                    ),
                ),
            ],
            options={
                "db_table": "Customer",
                "ordering": ["name"],
            },
        ),
    ]
