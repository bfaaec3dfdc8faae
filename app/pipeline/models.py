import uuid
from django.db import models
from django.utils import timezone
from ingest.models import AirFields, OceanFields, Upload


# ============================================================
# MASTER LIST - one entry per identifier, reconciled per upload
# ============================================================

class MasterEntryBookkeeping(models.Model):
    """Provenance and change tracking shared by both master lists."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    first_seen_upload = models.ForeignKey(Upload, on_delete=models.SET_NULL, null=True, blank=True,
                                          related_name='%(class)s_first_seen',
                                          help_text="Set once, when the identifier first appears")
    last_updated_upload = models.ForeignKey(Upload, on_delete=models.SET_NULL, null=True, blank=True,
                                            related_name='%(class)s_last_updated')
    last_update_reason = models.CharField(max_length=200, blank=True, default='',
                                          help_text="Comma-joined tracked fields changed on the last touch")
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        abstract = True


class OceanMasterEntry(OceanFields, MasterEntryBookkeeping):
    hb = models.CharField(max_length=255, unique=True, help_text="Normalized house bill")

    class Meta:
        db_table = 'ocean_master_entry'
        ordering = ['hb']
        verbose_name_plural = 'ocean master entries'

    def __str__(self):
        return self.hb


class AirMasterEntry(AirFields, MasterEntryBookkeeping):
    hawb = models.CharField(max_length=255, unique=True, help_text="Normalized house air waybill")

    class Meta:
        db_table = 'air_master_entry'
        ordering = ['hawb']
        verbose_name_plural = 'air master entries'

    def __str__(self):
        return self.hawb
