from django.core.management.base import BaseCommand, CommandError
from pipeline.export import MASTER_VIEWS, write_rows_csv
from pipeline.gateway import DjangoManifestGateway
from pipeline.report import latest_activity, master_list_metrics
from pipeline.shapes import SHAPES, get_shape


class Command(BaseCommand):
    help = 'Print Master List totals and latest upload activity, optionally exporting entries to CSV'

    def add_arguments(self, parser):
        parser.add_argument('--mode', type=str, choices=sorted(SHAPES), default='ocean')
        parser.add_argument('--export', type=str, default=None, metavar='PATH',
                            help='Write the entries of --view to this CSV file')
        parser.add_argument('--view', type=str, choices=MASTER_VIEWS, default='all')

    def handle(self, *args, **options):
        shape = get_shape(options['mode'])
        gateway = DjangoManifestGateway(shape)

        totals = master_list_metrics(gateway)
        self.stdout.write(self.style.WARNING(f'=== {shape.mode} master list ==='))
        self.stdout.write(
            f'  Entries: {totals["total_rows"]} '
            f'({totals["with_frl"]} with {shape.release_column}, {totals["without_frl"]} without)'
        )

        activity = latest_activity(gateway)
        for label in ['new', 'updated', 'released']:
            entries = activity[label]
            identifiers = ', '.join(entry[shape.key_field] for entry in entries)
            self.stdout.write(f'  Latest upload {label}: {len(entries)}' + (f' ({identifiers})' if entries else ''))

        if options['export']:
            rows = gateway.get_master_entries(options['view'])
            try:
                written = write_rows_csv(options['export'], rows, shape)
            except OSError as e:
                raise CommandError(f'Could not write {options["export"]}: {e}')
            self.stdout.write(self.style.SUCCESS(f'Exported {written} entries to {options["export"]}'))
