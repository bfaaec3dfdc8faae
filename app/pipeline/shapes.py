"""
Manifest shapes.

Ocean and air manifests are structurally parallel: a fixed header layout, one
identifier column used as the Master List key, one release column (FRL / LOG)
and a small set of tracked columns whose changes mark an entry as updated.
"""

from dataclasses import dataclass
from typing import Tuple

from pipeline.normalize import cell_text, normalize_identifier


@dataclass(frozen=True)
class TrackedField:
    column: str
    field: str
    reason: str


@dataclass(frozen=True)
class ManifestShape:
    mode: str
    columns: Tuple[Tuple[str, str], ...]
    key_column: str
    release_column: str
    group_column: str
    secondary_column: str
    presence_columns: Tuple[str, ...]
    tracked: Tuple[TrackedField, ...]

    @property
    def column_map(self):
        return dict(self.columns)

    @property
    def required_columns(self):
        return tuple(header for header, _ in self.columns)

    @property
    def fields(self):
        return tuple(field for _, field in self.columns)

    @property
    def key_field(self):
        return self.column_map[self.key_column]

    @property
    def release_field(self):
        return self.column_map[self.release_column]

    @property
    def group_field(self):
        return self.column_map[self.group_column]

    @property
    def secondary_field(self):
        return self.column_map[self.secondary_column]

    @property
    def release_reason(self):
        for tracked in self.tracked:
            if tracked.column == self.release_column:
                return tracked.reason
        return self.release_column

    def row_to_fields(self, row):
        """
        Map a header-keyed manifest row onto model field names.

        Cells are stringified and trimmed, missing cells become ''. The
        identifier column is normalized so every stored key is canonical.
        """
        values = {}
        for header, field in self.columns:
            if header == self.key_column:
                values[field] = normalize_identifier(row.get(header))
            else:
                values[field] = cell_text(row.get(header))
        return values


OCEAN = ManifestShape(
    mode='ocean',
    columns=(
        ('CONTAINER', 'container'),
        ('SEAL #', 'seal_number'),
        ('CARRIER', 'carrier'),
        ('MBL', 'mbl'),
        ('MI', 'mi'),
        ('VESSEL', 'vessel'),
        ('HB', 'hb'),
        ('OUTER QUANTITY', 'outer_quantity'),
        ('PCS', 'pcs'),
        ('WT_LBS', 'wt_lbs'),
        ('CNEE', 'cnee'),
        ('FRL', 'frl'),
        ('FILE_NO', 'file_no'),
        ('DEST', 'dest'),
        ('VOLUME', 'volume'),
        ('VBOND#', 'vbond'),
        ('TDF', 'tdf'),
    ),
    key_column='HB',
    release_column='FRL',
    group_column='MBL',
    secondary_column='CONTAINER',
    presence_columns=('CONTAINER', 'HB', 'MBL'),
    tracked=(
        TrackedField('FRL', 'frl', 'FRL'),
        TrackedField('TDF', 'tdf', 'TDF'),
        TrackedField('VBOND#', 'vbond', 'VBOND'),
    ),
)

AIR = ManifestShape(
    mode='air',
    columns=(
        ('MAWB', 'mawb'),
        ('HAWB', 'hawb'),
        ('Consignee', 'consignee'),
        ('Carrier', 'carrier'),
        ('FLIGHT NUMBER', 'flight_number'),
        ('FREIGHT LOCATION', 'freight_location'),
        ('ORIGIN', 'origin'),
        ('DESTINATION', 'destination'),
        ('File Number', 'file_number'),
        ('QTY', 'qty'),
        ('Shipment Type', 'shipment_type'),
        ('SLAC', 'slac'),
        ('WEIGHT', 'weight'),
        ('ETA', 'eta'),
        ('ETA TIME', 'eta_time'),
        ('LOG', 'log'),
        ('Flt Date', 'flt_date'),
    ),
    key_column='HAWB',
    release_column='LOG',
    group_column='MAWB',
    secondary_column='FLIGHT NUMBER',
    presence_columns=('MAWB', 'HAWB'),
    tracked=(
        TrackedField('LOG', 'log', 'LOG'),
        TrackedField('ETA', 'eta', 'ETA'),
    ),
)

SHAPES = {shape.mode: shape for shape in (OCEAN, AIR)}


def get_shape(mode):
    try:
        return SHAPES[mode]
    except KeyError:
        raise ValueError(f'Unknown manifest mode: {mode!r}') from None
