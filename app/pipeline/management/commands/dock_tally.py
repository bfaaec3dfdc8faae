from django.core.management.base import BaseCommand, CommandError
from pipeline.exceptions import ManifestError
from pipeline.gateway import DjangoManifestGateway
from pipeline.report import group_rows
from pipeline.shapes import SHAPES, get_shape


class Command(BaseCommand):
    help = 'Dock tally: items grouped by MBL (ocean) or MAWB (air)'

    def add_arguments(self, parser):
        parser.add_argument('--mode', type=str, choices=sorted(SHAPES), default='ocean')
        parser.add_argument('--upload', type=str, default=None,
                            help='Tally the rows of this upload instead of the master list')

    def handle(self, *args, **options):
        shape = get_shape(options['mode'])
        gateway = DjangoManifestGateway(shape)

        if options['upload']:
            try:
                upload = gateway.get_upload(options['upload'])
            except ManifestError as e:
                raise CommandError(str(e))
            rows = gateway.get_report_rows(upload.id)
            self.stdout.write(self.style.WARNING(f'=== Dock tally: {upload.filename} ==='))
        else:
            rows = gateway.get_master_entries()
            self.stdout.write(self.style.WARNING(f'=== Dock tally: {shape.mode} master list ==='))

        secondary_label = shape.secondary_column.lower()
        for key, group in sorted(group_rows(rows, shape).items()):
            self.stdout.write(self.style.SUCCESS(
                f'{shape.group_column} {key}: {len(group["items"])} items, '
                f'{len(group["secondary"])} {secondary_label} ({", ".join(group["secondary"]) or "-"})'
            ))
            for row in group['items']:
                self.stdout.write(f'  {row[shape.key_field] or "(no " + shape.key_column + ")"}')

        self.stdout.write(f'{len(rows)} items')
