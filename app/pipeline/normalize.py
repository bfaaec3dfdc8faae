import logging
import math
import re
from datetime import datetime, timedelta

logger = logging.getLogger(__name__)

SCIENTIFIC_RE = re.compile(r'^-?\d+\.?\d*[eE][+-]?\d+$')

# Spreadsheet day serials: day 0 is 1899-12-30.
SERIAL_EPOCH = datetime(1899, 12, 30)
SERIAL_MIN = 40000
SERIAL_MAX = 60000


def cell_text(value):
    """Stringify a raw cell value and trim it. None becomes ''."""
    if value is None:
        return ''
    return str(value).strip()


def is_blank(value):
    return cell_text(value) == ''


def normalize_identifier(raw):
    """
    Normalize an HB / HAWB identifier:
    1. Empty, missing or NaN -> ''
    2. Trim whitespace
    3. Scientific notation (6.17E+08) -> integer digits (617000000)
    4. Everything else is kept verbatim, case included (62R0537240)
    """
    if raw is None or raw == '':
        return ''

    if isinstance(raw, float):
        # Spreadsheet readers hand empty cells over as NaN
        if math.isnan(raw):
            return ''
        # and integral numbers as "617000000.0"
        if raw.is_integer():
            return str(int(raw))

    normalized = str(raw).strip()

    if SCIENTIFIC_RE.match(normalized):
        try:
            return str(int(float(normalized)))
        except (ValueError, OverflowError):
            logger.debug('Could not expand scientific identifier %r', normalized)

    return normalized


def has_value_changed(old_value, new_value):
    """
    True when a value appeared (empty -> non-empty) or changed between two
    non-empty values. A value becoming empty is not a change.
    """
    old = cell_text(old_value)
    new = cell_text(new_value)

    if not old and new:
        return True
    if old and new and old != new:
        return True
    return False


def normalize_date_for_comparison(raw):
    """
    Normalize a release date (FRL / LOG) so differently encoded values of the
    same calendar day compare equal.

    Formatted dates (anything containing '/') pass through trimmed. Numbers
    strictly between SERIAL_MIN and SERIAL_MAX are spreadsheet day serials and
    are rendered as MM/DD/YYYY. Anything else passes through trimmed.
    """
    value = cell_text(raw)
    if not value:
        return ''

    if '/' in value:
        return value

    try:
        serial = float(value)
    except ValueError:
        return value

    if SERIAL_MIN < serial < SERIAL_MAX:
        date = SERIAL_EPOCH + timedelta(days=serial)
        return date.strftime('%m/%d/%Y')

    return value
