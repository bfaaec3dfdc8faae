import logging

from pipeline.normalize import cell_text, normalize_identifier

logger = logging.getLogger(__name__)


def missing_columns(headers, shape):
    """
    Return required manifest columns absent from `headers`, in layout order.
    Returns empty list if all are present.
    """
    present = set(headers or [])
    return [column for column in shape.required_columns if column not in present]


def _has_value(value):
    text = cell_text(value)
    return bool(text) and text.lower() != 'nan'


def clean_rows(rows, shape):
    """
    Pre-clean parsed manifest rows:
    1. Trim every cell (None becomes '')
    2. Normalize the identifier column (HB / HAWB), blanking 'nan'
    3. Drop rows with no value in any presence column
       (CONTAINER / HB / MBL for ocean, MAWB / HAWB for air);
       the literal 'nan' left behind by spreadsheet exports counts as empty
    """
    cleaned = []
    dropped = 0
    for row in rows:
        values = {}
        for header, value in row.items():
            if header is None:
                # csv.DictReader puts overflow cells under a None key
                continue
            if header == shape.key_column:
                identifier = normalize_identifier(value)
                values[header] = identifier if _has_value(identifier) else ''
            else:
                values[header] = cell_text(value)

        if any(_has_value(values.get(column)) for column in shape.presence_columns):
            cleaned.append(values)
        else:
            dropped += 1

    if dropped:
        logger.info('Dropped %d %s rows with no %s', dropped, shape.mode, '/'.join(shape.presence_columns))
    return cleaned
