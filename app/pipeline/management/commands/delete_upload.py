from django.core.management.base import BaseCommand, CommandError
from pipeline.exceptions import ManifestError
from pipeline.gateway import DELETE_POLICIES, DjangoManifestGateway
from pipeline.shapes import SHAPES, get_shape


class Command(BaseCommand):
    help = 'Delete an upload, its report rows and the master list entries first seen in it'

    def add_arguments(self, parser):
        parser.add_argument('upload_id', type=str, help='Upload to delete')
        parser.add_argument('--mode', type=str, choices=sorted(SHAPES), default='ocean')
        parser.add_argument('--policy', type=str, choices=DELETE_POLICIES, default=None,
                            help='delete entries first seen in the upload, or nullify their provenance '
                                 '(default: MASTER_LIST_DELETE_POLICY setting)')

    def handle(self, *args, **options):
        gateway = DjangoManifestGateway(get_shape(options['mode']))

        try:
            result = gateway.delete_upload(options['upload_id'], policy=options['policy'])
        except ManifestError as e:
            raise CommandError(str(e))

        self.stdout.write(self.style.SUCCESS(
            f'Deleted upload {options["upload_id"]}: {result.rows_deleted} rows, '
            f'{result.entries_deleted} master entries deleted, '
            f'{result.entries_orphaned} master entries kept without first-seen upload'
        ))
