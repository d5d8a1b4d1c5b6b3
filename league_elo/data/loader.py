"""Reading league feeds and writing standings."""

import json
import logging
from typing import List

from ..models.standings import StandingsTable

logger = logging.getLogger(__name__)


class DataLoader:
    """Loads feed rows from text and saves computed tables."""

    @staticmethod
    def rows_from_text(text: str) -> List[str]:
        """
        Split pasted feed text into rows.

        Args:
            text: Tab-delimited text, one match or fixture per line

        Returns:
            List of raw rows (line endings removed)
        """
        return text.splitlines()

    @staticmethod
    def load_rows(file_path: str) -> List[str]:
        """
        Load feed rows from a text file.

        Args:
            file_path: Path to a tab-delimited export

        Returns:
            List of raw rows
        """
        with open(file_path, "r", encoding="utf-8") as f:
            rows = DataLoader.rows_from_text(f.read())

        logger.info(f"Read {len(rows)} rows from {file_path}")
        return rows

    @staticmethod
    def save_table_to_json(table: StandingsTable, file_path: str) -> None:
        """
        Save a standings table to a JSON file.

        Args:
            table: Table to save
            file_path: Output file path
        """
        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(table.to_dict(), f, indent=2)

    @staticmethod
    def load_table_from_json(file_path: str) -> StandingsTable:
        """
        Load a standings table saved by save_table_to_json.

        Args:
            file_path: Path to the saved standings

        Returns:
            StandingsTable with team records and state restored
        """
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Standings file {file_path} must contain a JSON object")

        table = StandingsTable.from_dict(data)
        logger.info(f"Loaded {len(table)} teams from {file_path}")
        return table

    @staticmethod
    def create_sample_data(output_path: str) -> None:
        """
        Create a sample league feed for trying out the tool.

        Args:
            output_path: Path to save the sample feed
        """
        fixtures = [
            ("9/7/2024", "9:00 AM", "Field 1", "Red Dragons", "3", "1", "Blue Sharks"),
            ("9/7/2024", "10:30 AM", "Field 2", "Green Hornets", "2", "2", "Gold Eagles"),
            ("9/14/2024", "9:00 AM", "Field 1", "Blue Sharks", "0", "2", "Gold Eagles"),
            ("9/14/2024", "10:30 AM", "Field 2", "Red Dragons", "1", "0", "Green Hornets"),
            ("9/21/2024", "9:00 AM", "Field 3", "Gold Eagles", "1", "1", "Red Dragons"),
            ("9/21/2024", "10:30 AM", "Field 1", "Green Hornets", "4", "2", "Blue Sharks"),
            ("9/28/2024", "9:00 AM", "Field 2", "Blue Sharks", "", "", "Red Dragons"),
            ("9/28/2024", "10:30 AM", "Field 3", "Gold Eagles", "", "", "Green Hornets"),
        ]

        lines = []
        for idx, (date, time, field, home, hg, ag, away) in enumerate(fixtures, start=1):
            lines.append("\t".join([str(idx), date, time, field, home, hg, ag, away, "U12B", "", ""]))

        with open(output_path, "w", encoding="utf-8") as f:
            f.write("\n".join(lines) + "\n")
