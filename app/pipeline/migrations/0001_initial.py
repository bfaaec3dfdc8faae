# Generated migration

from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('ingest', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='OceanMasterEntry',
            fields=[
                ('container', models.CharField(blank=True, default='', max_length=255)),
                ('seal_number', models.CharField(blank=True, default='', max_length=255)),
                ('carrier', models.CharField(blank=True, default='', max_length=255)),
                ('mbl', models.CharField(blank=True, db_index=True, default='', max_length=255)),
                ('mi', models.CharField(blank=True, default='', max_length=255)),
                ('vessel', models.CharField(blank=True, default='', max_length=255)),
                ('hb', models.CharField(help_text='Normalized house bill', max_length=255, unique=True)),
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
                ('last_update_reason', models.CharField(blank=True, default='', help_text='Comma-joined tracked fields changed on the last touch', max_length=200)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('updated_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('first_seen_upload', models.ForeignKey(blank=True, help_text='Set once, when the identifier first appears', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='oceanmasterentry_first_seen', to='ingest.upload')),
                ('last_updated_upload', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='oceanmasterentry_last_updated', to='ingest.upload')),
            ],
            options={
                'verbose_name_plural': 'ocean master entries',
                'db_table': 'ocean_master_entry',
                'ordering': ['hb'],
            },
        ),
        migrations.CreateModel(
            name='AirMasterEntry',
            fields=[
                ('mawb', models.CharField(blank=True, db_index=True, default='', max_length=255)),
                ('hawb', models.CharField(help_text='Normalized house air waybill', max_length=255, unique=True)),
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
                ('last_update_reason', models.CharField(blank=True, default='', help_text='Comma-joined tracked fields changed on the last touch', max_length=200)),
                ('created_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('updated_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('first_seen_upload', models.ForeignKey(blank=True, help_text='Set once, when the identifier first appears', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='airmasterentry_first_seen', to='ingest.upload')),
                ('last_updated_upload', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='airmasterentry_last_updated', to='ingest.upload')),
            ],
            options={
                'verbose_name_plural': 'air master entries',
                'db_table': 'air_master_entry',
                'ordering': ['hawb'],
            },
        ),
    ]
