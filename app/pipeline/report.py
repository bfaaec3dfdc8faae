"""
Dashboard numbers and dock tally grouping over stored rows.

Rows are the field-keyed dicts returned by the gateway, either report rows of
one upload or Master List entries.
"""

from pipeline.normalize import is_blank


def release_counts(rows, shape):
    with_release = sum(1 for row in rows if not is_blank(row.get(shape.release_field)))
    return {
        'total_rows': len(rows),
        'with_frl': with_release,
        'without_frl': len(rows) - with_release,
    }


def upload_metrics(rows, shape, comparison=None):
    """
    Summary for one upload: row counts, distinct MBL / MAWB values and, when
    a comparison is given, new / removed / newly released item counts.
    """
    metrics = release_counts(rows, shape)
    metrics['unique_groups'] = len({
        row.get(shape.group_field).strip() for row in rows if not is_blank(row.get(shape.group_field))
    })
    if comparison is not None:
        metrics['new_items'] = comparison.new_items
        metrics['removed_items'] = comparison.removed_items
        metrics['newly_released'] = comparison.newly_released_items
    return metrics


def master_list_metrics(gateway):
    return release_counts(gateway.get_master_entries(), gateway.shape)


def latest_activity(gateway):
    """
    Master List entries touched by the most recent upload:
    first seen in it, updated by it, or released by it.
    """
    uploads = gateway.list_uploads()
    activity = {'new': [], 'updated': [], 'released': []}
    if not uploads:
        return activity

    latest = max(uploads, key=lambda upload: (upload.upload_date, str(upload.id)))
    release_reason = gateway.shape.release_reason

    for entry in gateway.get_master_entries_touched_by(latest.id):
        if entry['first_seen_upload_id'] == latest.id:
            activity['new'].append(entry)
        reasons = entry['last_update_reason']
        if entry['last_updated_upload_id'] == latest.id and reasons:
            activity['updated'].append(entry)
            if release_reason in reasons.split(', '):
                activity['released'].append(entry)
    return activity


def group_rows(rows, shape):
    """
    Dock tally grouping: rows by MBL (ocean) or MAWB (air).

    Each group lists the distinct containers (ocean) or flight numbers (air)
    in first-seen order. Rows without a group value go under 'NO MBL' /
    'NO MAWB'.
    """
    missing = f'NO {shape.group_column}'
    grouped = {}
    for row in rows:
        key = (row.get(shape.group_field) or '').strip() or missing
        group = grouped.setdefault(key, {'key': key, 'secondary': [], 'items': []})
        secondary = (row.get(shape.secondary_field) or '').strip()
        if secondary and secondary not in group['secondary']:
            group['secondary'].append(secondary)
        group['items'].append(row)
    return grouped
