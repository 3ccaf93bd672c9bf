"""
CSV export of scheduled posts.

Fixed dialect: comma delimiter, every data field double-quoted with inner
quotes doubled, None written as an empty field. The header row is the key
order of the first row and is left unquoted.
"""
import csv
import io
from typing import Dict, List

EMPTY_EXPORT = 'platform,scheduled_at,caption,hashtags\n'


def to_csv(rows: List[Dict]) -> str:
    """
    Serialize homogeneous dict rows to CSV text.

    Returns the fixed header-only line for an empty row list. Otherwise the
    header, then one line per row, joined by newlines with no trailing newline.
    """
    if not rows:
        return EMPTY_EXPORT

    keys = list(rows[0].keys())
    output = io.StringIO()
    writer = csv.writer(output, quoting=csv.QUOTE_ALL, lineterminator='\n')
    for row in rows:
        writer.writerow(['' if row.get(k) is None else row.get(k) for k in keys])

    return ','.join(keys) + '\n' + output.getvalue()[:-1]
