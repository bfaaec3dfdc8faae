import uuid
from django.db import models
from django.utils import timezone


class Upload(models.Model):
    """
    Upload history: one row per ingested manifest file.
    upload_date is the only field that orders uploads chronologically.
    """
    MODE_CHOICES = [
        ('ocean', 'Ocean'),
        ('air', 'Air'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    mode = models.CharField(max_length=10, choices=MODE_CHOICES, default='ocean', db_index=True)
    filename = models.CharField(max_length=500)
    row_count = models.IntegerField(default=0)
    upload_date = models.DateTimeField(default=timezone.now, db_index=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'upload'
        indexes = [
            models.Index(fields=['mode', '-upload_date'], name='upload_mode_date_idx'),
        ]
        ordering = ['-upload_date']

    def __str__(self):
        return f"{self.mode}:{self.filename} ({self.row_count} rows)"


# ============================================================
# Manifest columns shared by report rows and master entries
# ============================================================

class OceanFields(models.Model):
    container = models.CharField(max_length=255, blank=True, default='')
    seal_number = models.CharField(max_length=255, blank=True, default='')
    carrier = models.CharField(max_length=255, blank=True, default='')
    mbl = models.CharField(max_length=255, blank=True, default='', db_index=True)
    mi = models.CharField(max_length=255, blank=True, default='')
    vessel = models.CharField(max_length=255, blank=True, default='')
    hb = models.CharField(max_length=255, blank=True, default='', db_index=True,
                          help_text="Normalized house bill")
    outer_quantity = models.CharField(max_length=255, blank=True, default='')
    pcs = models.CharField(max_length=255, blank=True, default='')
    wt_lbs = models.CharField(max_length=255, blank=True, default='')
    cnee = models.TextField(blank=True, default='')
    frl = models.CharField(max_length=255, blank=True, default='',
                           help_text="Freight release date, MM/DD/YYYY or day serial")
    file_no = models.CharField(max_length=255, blank=True, default='')
    dest = models.CharField(max_length=255, blank=True, default='')
    volume = models.CharField(max_length=255, blank=True, default='')
    vbond = models.CharField(max_length=255, blank=True, default='')
    tdf = models.CharField(max_length=255, blank=True, default='')

    class Meta:
        abstract = True


class AirFields(models.Model):
    mawb = models.CharField(max_length=255, blank=True, default='', db_index=True)
    hawb = models.CharField(max_length=255, blank=True, default='', db_index=True,
                            help_text="Normalized house air waybill")
    consignee = models.TextField(blank=True, default='')
    carrier = models.CharField(max_length=255, blank=True, default='')
    flight_number = models.CharField(max_length=255, blank=True, default='')
    freight_location = models.CharField(max_length=255, blank=True, default='')
    origin = models.CharField(max_length=255, blank=True, default='')
    destination = models.CharField(max_length=255, blank=True, default='')
    file_number = models.CharField(max_length=255, blank=True, default='')
    qty = models.CharField(max_length=255, blank=True, default='')
    shipment_type = models.CharField(max_length=255, blank=True, default='')
    slac = models.CharField(max_length=255, blank=True, default='')
    weight = models.CharField(max_length=255, blank=True, default='')
    eta = models.CharField(max_length=255, blank=True, default='')
    eta_time = models.CharField(max_length=255, blank=True, default='')
    log = models.CharField(max_length=255, blank=True, default='',
                           help_text="Air release date, MM/DD/YYYY or day serial")
    flt_date = models.CharField(max_length=255, blank=True, default='')

    class Meta:
        abstract = True


# ============================================================
# UPLOAD HISTORY - raw rows, append-only
# ============================================================

class OceanReportRow(OceanFields):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    upload = models.ForeignKey(Upload, on_delete=models.CASCADE, related_name='ocean_rows')
    line_number = models.IntegerField(default=0)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'ocean_report_row'
        ordering = ['upload', 'line_number']

    def __str__(self):
        return f"HB {self.hb or '-'} (MBL {self.mbl or '-'})"


class AirReportRow(AirFields):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    upload = models.ForeignKey(Upload, on_delete=models.CASCADE, related_name='air_rows')
    line_number = models.IntegerField(default=0)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'air_report_row'
        ordering = ['upload', 'line_number']

    def __str__(self):
        return f"HAWB {self.hawb or '-'} (MAWB {self.mawb or '-'})"
