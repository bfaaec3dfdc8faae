from django.contrib import admin
from .models import AirMasterEntry, OceanMasterEntry

BOOKKEEPING_FIELDS = [
    'id', 'first_seen_upload', 'last_updated_upload', 'last_update_reason', 'created_at', 'updated_at',
]


@admin.register(OceanMasterEntry)
class OceanMasterEntryAdmin(admin.ModelAdmin):
    list_display = ['hb', 'mbl', 'container', 'frl', 'tdf', 'vbond', 'last_update_reason', 'updated_at']
    list_filter = ['carrier', 'last_update_reason']
    search_fields = ['hb', 'mbl', 'container']
    readonly_fields = BOOKKEEPING_FIELDS


@admin.register(AirMasterEntry)
class AirMasterEntryAdmin(admin.ModelAdmin):
    list_display = ['hawb', 'mawb', 'flight_number', 'log', 'eta', 'last_update_reason', 'updated_at']
    list_filter = ['carrier', 'last_update_reason']
    search_fields = ['hawb', 'mawb', 'flight_number']
    readonly_fields = BOOKKEEPING_FIELDS
