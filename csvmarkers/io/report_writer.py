"""
Import report output.

Writes the per-row outcome of an import run so an editor can see which
CSV lines did not become markers and why.
"""

from datetime import datetime
from pathlib import Path

import pandas as pd

from csvmarkers.data.models import ImportResult
from csvmarkers.utils.constants import REPORT_COLUMNS
from csvmarkers.utils.logger import get_logger

logger = get_logger(__name__)


class ReportWriter:
    """Writes ImportResult tables to Excel or CSV."""

    @staticmethod
    def outcomes_frame(result: ImportResult) -> pd.DataFrame:
        """One row per marker record offered to the sink, in file order."""
        rows = [
            {
                "line": outcome.line_number,
                "timestamp": outcome.record.timestamp_text,
                "seconds": outcome.seconds,
                "comment": outcome.record.comment_text,
                "status": outcome.status.value,
                "reason": outcome.reason.value if outcome.reason else "",
            }
            for outcome in result.outcomes
        ]
        return pd.DataFrame(rows, columns=list(REPORT_COLUMNS))

    @staticmethod
    def dropped_frame(result: ImportResult) -> pd.DataFrame:
        """Rows removed before marker placement."""
        rows = [
            {"line": issue.line_number, "reason": issue.reason.value, "detail": issue.detail}
            for issue in result.dropped_rows
        ]
        return pd.DataFrame(rows, columns=["line", "reason", "detail"])

    @staticmethod
    def summary_frame(result: ImportResult, source_name: str = "") -> pd.DataFrame:
        return pd.DataFrame(
            {
                "Metric": ["Source", "Generated", "Inserted", "Skipped", "Dropped rows"],
                "Value": [
                    source_name,
                    datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
                    result.inserted_count,
                    result.skipped_count,
                    len(result.dropped_rows),
                ],
            }
        )

    @classmethod
    def write(cls, result: ImportResult, output_path: Path | str, source_name: str = "") -> Path:
        """
        Write an import report.

        ``.xlsx`` files get Summary, Markers and Dropped Rows sheets; any
        other extension is written as a CSV of the marker outcomes.

        Args:
            result: Finished import result
            output_path: Report file path
            source_name: Input file name shown on the summary sheet

        Returns:
            Path that was written
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        df = cls.outcomes_frame(result)

        if output_path.suffix.lower() == ".xlsx":
            with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
                cls.summary_frame(result, source_name).to_excel(writer, sheet_name="Summary", index=False)
                df.to_excel(writer, sheet_name="Markers", index=False)
                cls.dropped_frame(result).to_excel(writer, sheet_name="Dropped Rows", index=False)
        else:
            df.to_csv(output_path, index=False)

        logger.info(f"Report saved to: {output_path}")
        return output_path
