from django.core.management.base import BaseCommand, CommandError
from pipeline.compare import compare_upload
from pipeline.exceptions import ManifestError
from pipeline.export import UPLOAD_VIEWS, upload_view_rows, write_rows_csv
from pipeline.gateway import DjangoManifestGateway
from pipeline.report import latest_activity, master_list_metrics, upload_metrics
from pipeline.shapes import SHAPES, get_shape


class Command(BaseCommand):
    help = 'Compare an upload with the upload before it and print dashboard metrics'

    def add_arguments(self, parser):
        parser.add_argument('upload_id', type=str, help='Upload to compare')
        parser.add_argument('--mode', type=str, choices=sorted(SHAPES), default='ocean')
        parser.add_argument('--export', type=str, default=None, metavar='PATH',
                            help='Write the rows of --view to this CSV file')
        parser.add_argument('--view', type=str, choices=UPLOAD_VIEWS, default='all',
                            help='Rows to export: a release filter, or the new / removed / released items')

    def handle(self, *args, **options):
        shape = get_shape(options['mode'])
        gateway = DjangoManifestGateway(shape)

        try:
            comparison = compare_upload(shape, options['upload_id'], gateway=gateway)
        except ManifestError as e:
            raise CommandError(str(e))

        upload = comparison.upload
        previous = comparison.previous_upload
        self.stdout.write(self.style.WARNING(f'=== {upload.filename} ({upload.upload_date:%Y-%m-%d %H:%M}) ==='))
        if previous is None:
            self.stdout.write('  Previous upload: none (first upload)')
        else:
            self.stdout.write(f'  Previous upload: {previous.filename} ({previous.upload_date:%Y-%m-%d %H:%M})')

        metrics = upload_metrics(gateway.get_report_rows(upload.id), shape, comparison)
        self.stdout.write(self.style.SUCCESS(
            f'  Rows: {metrics["total_rows"]} '
            f'({metrics["with_frl"]} with {shape.release_column}, '
            f'{metrics["without_frl"]} without), '
            f'{metrics["unique_groups"]} unique {shape.group_column}'
        ))
        self.stdout.write(self.style.SUCCESS(
            f'  New items: {metrics["new_items"]}, removed items: {metrics["removed_items"]}, '
            f'newly released: {metrics["newly_released"]}'
        ))

        totals = master_list_metrics(gateway)
        self.stdout.write(
            f'  Master list: {totals["total_rows"]} entries, '
            f'{totals["with_frl"]} with {shape.release_column}, {totals["without_frl"]} without'
        )
        activity = latest_activity(gateway)
        self.stdout.write(
            f'  Latest upload activity: {len(activity["new"])} new, '
            f'{len(activity["updated"])} updated, {len(activity["released"])} released'
        )

        if options['export']:
            rows = upload_view_rows(gateway, comparison, options['view'])
            try:
                written = write_rows_csv(options['export'], rows, shape)
            except OSError as e:
                raise CommandError(f'Could not write {options["export"]}: {e}')
            self.stdout.write(self.style.SUCCESS(f'Exported {written} {options["view"]} rows to {options["export"]}'))
