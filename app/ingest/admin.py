from django.contrib import admin
from .models import AirReportRow, OceanReportRow, Upload


@admin.register(Upload)
class UploadAdmin(admin.ModelAdmin):
    list_display = ['filename', 'mode', 'row_count', 'upload_date']
    list_filter = ['mode']
    search_fields = ['filename']
    readonly_fields = ['id', 'created_at']
    date_hierarchy = 'upload_date'
    ordering = ['-upload_date']


@admin.register(OceanReportRow)
class OceanReportRowAdmin(admin.ModelAdmin):
    list_display = ['hb', 'mbl', 'container', 'carrier', 'frl', 'upload']
    list_filter = ['carrier']
    search_fields = ['hb', 'mbl', 'container']
    readonly_fields = ['id', 'upload', 'created_at']


@admin.register(AirReportRow)
class AirReportRowAdmin(admin.ModelAdmin):
    list_display = ['hawb', 'mawb', 'flight_number', 'carrier', 'log', 'upload']
    list_filter = ['carrier']
    search_fields = ['hawb', 'mawb', 'flight_number']
    readonly_fields = ['id', 'upload', 'created_at']
