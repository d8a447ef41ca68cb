import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Diagnosis",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("diagnosis_code", models.CharField(max_length=16, unique=True)),
                ("name", models.CharField(blank=True, default="", max_length=255)),
            ],
        ),
        migrations.CreateModel(
            name="Patient",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("jmbg", models.CharField(db_index=True, max_length=13, verbose_name="JMBG")),
                ("first_name", models.CharField(max_length=100)),
                ("last_name", models.CharField(max_length=100)),
            ],
        ),
        migrations.CreateModel(
            name="ReferringDoctor",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("code_doctor", models.CharField(db_index=True, max_length=32)),
                ("first_name", models.CharField(max_length=100)),
                ("last_name", models.CharField(max_length=100)),
            ],
        ),
        migrations.CreateModel(
            name="ReferringFacility",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("code", models.CharField(db_index=True, max_length=32)),
                ("name", models.CharField(max_length=255)),
            ],
        ),
        migrations.CreateModel(
            name="Service",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("service_code", models.CharField(max_length=16, unique=True)),
                ("name", models.CharField(blank=True, default="", max_length=255)),
            ],
        ),
        migrations.CreateModel(
            name="Invoice",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("invoice_tip", models.PositiveSmallIntegerField(choices=[(5, "Rješenje (5)"), (14, "Uputnica (14)")])),
                ("invoice_date", models.DateField()),
                ("is_locked", models.BooleanField(default=False)),
                ("zbirna_faktura_broj", models.CharField(blank=True, max_length=50, null=True)),
                ("zbirna_faktura_date", models.DateField(blank=True, null=True)),
                ("account_number", models.CharField(blank=True, max_length=50, null=True)),
                ("handover", models.DateField(blank=True, null=True)),
                ("id_uputnice", models.CharField(blank=True, max_length=50, null=True)),
                (
                    "diagnosis",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="invoices",
                        to="dentalpay_app.diagnosis",
                    ),
                ),
                (
                    "patient",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="invoices",
                        to="dentalpay_app.patient",
                    ),
                ),
                (
                    "referring_doctor",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="invoices",
                        to="dentalpay_app.referringdoctor",
                    ),
                ),
                (
                    "referring_facility",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="invoices",
                        to="dentalpay_app.referringfacility",
                    ),
                ),
            ],
            options={
                "indexes": [
                    models.Index(fields=["invoice_date"], name="invoice_date_idx"),
                    models.Index(fields=["zbirna_faktura_broj"], name="invoice_zbirna_broj_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="InvoiceItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("quantity", models.PositiveIntegerField(default=1)),
                ("fund_amount", models.DecimalField(decimal_places=2, default=0, max_digits=10)),
                ("patient_amount", models.DecimalField(decimal_places=2, default=0, max_digits=10)),
                (
                    "invoice",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="invoice_items",
                        to="dentalpay_app.invoice",
                    ),
                ),
                (
                    "service",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="invoice_items",
                        to="dentalpay_app.service",
                    ),
                ),
            ],
        ),
    ]
