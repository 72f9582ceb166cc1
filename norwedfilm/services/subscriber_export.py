"""
Subscriber list export for the admin "Download CSV" button.
"""

from io import StringIO
from typing import Iterable, Optional

import pandas as pd

from norwedfilm.models.subscriber import Subscriber

CSV_COLUMNS = ["Email", "Name", "Status", "Source", "Subscribed Date"]


def _row(subscriber: Subscriber) -> dict:
    created_at = subscriber.created_at
    return {
        "Email": subscriber.email,
        "Name": subscriber.name or "",
        "Status": subscriber.status or "active",
        "Source": subscriber.source or "",
        "Subscribed Date": created_at.date().isoformat() if created_at else "",
    }


def subscribers_to_csv(subscribers: Iterable[Subscriber]) -> Optional[str]:
    """
    One header line plus one line per subscriber, or None when there is
    nobody to export.
    """
    rows = [_row(s) for s in subscribers]
    if not rows:
        return None

    df = pd.DataFrame(rows, columns=CSV_COLUMNS)
    output = StringIO()
    df.to_csv(output, index=False, lineterminator="\n")
    return output.getvalue()
