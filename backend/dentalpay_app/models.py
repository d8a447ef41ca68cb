from django.db import models


class Patient(models.Model):
    jmbg = models.CharField("JMBG", max_length=13, db_index=True)
    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)

    def __str__(self):
        return f"{self.first_name} {self.last_name} ({self.jmbg})"


class Diagnosis(models.Model):
    diagnosis_code = models.CharField(max_length=16, unique=True)
    name = models.CharField(max_length=255, blank=True, default="")

    def __str__(self):
        return self.diagnosis_code


class ReferringFacility(models.Model):
    code = models.CharField(max_length=32, db_index=True)
    name = models.CharField(max_length=255)

    def __str__(self):
        return f"{self.name} ({self.code})"


class ReferringDoctor(models.Model):
    code_doctor = models.CharField(max_length=32, db_index=True)
    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)

    def __str__(self):
        return f"{self.first_name} {self.last_name} ({self.code_doctor})"


class Service(models.Model):
    # level (1) + group (3) + label (3), e.g. "1234567"
    service_code = models.CharField(max_length=16, unique=True)
    name = models.CharField(max_length=255, blank=True, default="")

    def __str__(self):
        return f"{self.service_code} {self.name}".strip()


class Invoice(models.Model):
    TIP_RJESENJE = 5
    TIP_UPUTNICA = 14

    TIP_CHOICES = [
        (TIP_RJESENJE, "Rješenje (5)"),
        (TIP_UPUTNICA, "Uputnica (14)"),
    ]

    invoice_tip = models.PositiveSmallIntegerField(choices=TIP_CHOICES)
    invoice_date = models.DateField()
    is_locked = models.BooleanField(default=False)

    # Grouped (zbirna) invoice; only grouped invoices go to the fund
    zbirna_faktura_broj = models.CharField(max_length=50, blank=True, null=True)
    zbirna_faktura_date = models.DateField(blank=True, null=True)

    # Type 5
    account_number = models.CharField(max_length=50, blank=True, null=True)
    handover = models.DateField(blank=True, null=True)

    # Type 14
    id_uputnice = models.CharField(max_length=50, blank=True, null=True)

    patient = models.ForeignKey(Patient, on_delete=models.PROTECT, blank=True, null=True, related_name="invoices")
    diagnosis = models.ForeignKey(Diagnosis, on_delete=models.PROTECT, blank=True, null=True, related_name="invoices")
    referring_facility = models.ForeignKey(
        ReferringFacility, on_delete=models.PROTECT, blank=True, null=True, related_name="invoices"
    )
    referring_doctor = models.ForeignKey(
        ReferringDoctor, on_delete=models.PROTECT, blank=True, null=True, related_name="invoices"
    )

    class Meta:
        indexes = [
            models.Index(fields=["invoice_date"], name="invoice_date_idx"),
            models.Index(fields=["zbirna_faktura_broj"], name="invoice_zbirna_broj_idx"),
        ]

    def __str__(self):
        return f"Faktura #{self.pk} tip={self.invoice_tip} ({self.invoice_date})"


class InvoiceItem(models.Model):
    invoice = models.ForeignKey(Invoice, on_delete=models.CASCADE, related_name="invoice_items")
    service = models.ForeignKey(Service, on_delete=models.PROTECT, blank=True, null=True, related_name="invoice_items")
    quantity = models.PositiveIntegerField(default=1)
    fund_amount = models.DecimalField(max_digits=10, decimal_places=2, default=0)      # insurer share
    patient_amount = models.DecimalField(max_digits=10, decimal_places=2, default=0)   # co-payment

    def __str__(self):
        code = self.service.service_code if self.service_id else ""
        return f"{code} x{self.quantity}"
