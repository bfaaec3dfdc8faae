# Generated migration

from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Upload',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('mode', models.CharField(choices=[('ocean', 'Ocean'), ('air', 'Air')], db_index=True, default='ocean', max_length=10)),
                ('filename', models.CharField(max_length=500)),
                ('row_count', models.IntegerField(default=0)),
                ('upload_date', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                'db_table': 'upload',
                'ordering': ['-upload_date'],
            },
        ),
        migrations.AddIndex(
            model_name='upload',
            index=models.Index(fields=['mode', '-upload_date'], name='upload_mode_date_idx'),
        ),
        migrations.CreateModel(
            name='OceanReportRow',
            fields=[
                ('container', models.CharField(blank=True, default='', max_length=255)),
                ('seal_number', models.CharField(blank=True, default='', max_length=255)),
                ('carrier', models.CharField(blank=True, default='', max_length=255)),
                ('mbl', models.CharField(blank=True, db_index=True, default='', max_length=255)),
                ('mi', models.CharField(blank=True, default='', max_length=255)),
                ('vessel', models.CharField(blank=True, default='', max_length=255)),
                ('hb', models.CharField(blank=True, db_index=True, default='', help_text='Normalized house bill', max_length=255)),
                ('outer_quantity', models.CharField(blank=True, default='', max_length=255)),
                ('pcs', models.CharField(blank=True, default='', max_length=255)),
                ('wt_lbs', models.CharField(blank=True, default='', max_length=255)),
                ('cnee', models.TextField(blank=True, default='')),
                ('frl', models.CharField(blank=True, default='', help_text='Freight release date, MM/DD/YYYY or day serial', max_length=255)),
                ('file_no', models.CharField(blank=True, default='', max_length=255)),
                ('dest', models.CharField(blank=True, default='', max_length=255)),
                ('volume', models.CharField(blank=True, default='', max_length=255)),
                ('vbond', models.CharField(blank=True, default='', max_length=255)),
                ('tdf', models.CharField(blank=True, default='', max_length=255)),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('line_number', models.IntegerField(default=0)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('upload', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='ocean_rows', to='ingest.upload')),
            ],
            options={
                'db_table': 'ocean_report_row',
                'ordering': ['upload', 'line_number'],
            },
        ),
        migrations.CreateModel(
            name='AirReportRow',
            fields=[
                ('mawb', models.CharField(blank=True, db_index=True, default='', max_length=255)),
                ('hawb', models.CharField(blank=True, db_index=True, default='', help_text='Normalized house air waybill', max_length=255)),
                ('consignee', models.TextField(blank=True, default='')),
                ('carrier', models.CharField(blank=True, default='', max_length=255)),
                ('flight_number', models.CharField(blank=True, default='', max_length=255)),
                ('freight_location', models.CharField(blank=True, default='', max_length=255)),
                ('origin', models.CharField(blank=True, default='', max_length=255)),
                ('destination', models.CharField(blank=True, default='', max_length=255)),
                ('file_number', models.CharField(blank=True, default='', max_length=255)),
                ('qty', models.CharField(blank=True, default='', max_length=255)),
                ('shipment_type', models.CharField(blank=True, default='', max_length=255)),
                ('slac', models.CharField(blank=True, default='', max_length=255)),
                ('weight', models.CharField(blank=True, default='', max_length=255)),
                ('eta', models.CharField(blank=True, default='', max_length=255)),
                ('eta_time', models.CharField(blank=True, default='', max_length=255)),
                ('log', models.CharField(blank=True, default='', help_text='Air release date, MM/DD/YYYY or day serial', max_length=255)),
                ('flt_date', models.CharField(blank=True, default='', max_length=255)),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('line_number', models.IntegerField(default=0)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('upload', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='air_rows', to='ingest.upload')),
            ],
            options={
                'db_table': 'air_report_row',
                'ordering': ['upload', 'line_number'],
            },
        ),
    ]
