"""
Tabular export of parsed reports.

Flattens a ParsedReport to one row per news item (see
ParsedReport.to_dataframe) and writes it as CSV.
"""

import logging
from pathlib import Path
from typing import Union

from news_trends_text.models import ParsedReport

logger = logging.getLogger(__name__)


def export_items_csv(report: ParsedReport, path: Union[str, Path]) -> Path:
    """
    Save the report's news items to a CSV file.

    Parent directories are created as needed.

    Args:
        report: Parsed report
        path: Destination CSV path

    Returns:
        Path to the saved CSV file

    Example:
        >>> export_items_csv(report, "data/temp/news_items.csv")
        PosixPath('data/temp/news_items.csv')
    """
    csv_path = Path(path)
    csv_path.parent.mkdir(parents=True, exist_ok=True)

    df = report.to_dataframe()
    df.to_csv(csv_path, index=False, encoding='utf-8')

    logger.info(f"✓ Saved {len(df)} news items to {csv_path}")
    return csv_path
