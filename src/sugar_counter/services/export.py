"""CSV export of daily totals."""

from datetime import date

import pandas as pd

from sugar_counter.services.aggregation import sorted_day_totals

CSV_COLUMNS = ("Date", "Total Refined Sugar (g)")
EXPORT_DATE_FORMAT = "%d/%m/%Y"


def daily_totals_frame(totals: dict[str, float]) -> pd.DataFrame:
    """Build a chronologically sorted frame of day totals."""
    rows = [
        (day.day.strftime(EXPORT_DATE_FORMAT), day.total)
        for day in sorted_day_totals(totals)
    ]
    return pd.DataFrame(rows, columns=list(CSV_COLUMNS))


def export_csv(totals: dict[str, float]) -> str:
    return daily_totals_frame(totals).to_csv(
        index=False, float_format="%.1f", lineterminator="\n"
    )


def export_filename(today: date) -> str:
    return f"SugarCounter_Export_{today.strftime('%d-%m-%Y')}.csv"
