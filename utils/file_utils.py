"""
Utility functions for handling CSV file operations.
"""
import csv
import os
from typing import Any, Dict, List

from methods.matrix import InvalidMatrixError

RESULT_FIELDS = ['criterion', 'value', 'strategy']


class CSVHandler:
    def __init__(self, data_dir: str = '.'):
        """Initialize CSV handler with data directory path."""
        self.data_dir = data_dir

    def _ensure_data_dir_exists(self):
        """Create data directory if it doesn't exist."""
        if not os.path.exists(self.data_dir):
            os.makedirs(self.data_dir)

    def _get_file_path(self, filename: str) -> str:
        """Get full path for a CSV file."""
        return os.path.join(self.data_dir, filename)

    def read_all(self, filename: str) -> List[List[str]]:
        """Read all rows from a CSV file."""
        file_path = self._get_file_path(filename)
        with open(file_path, 'r', newline='') as f:
            reader = csv.reader(f)
            return list(reader)

    def read_matrix(self, filename: str, skip_header: bool = False) -> List[List[float]]:
        """Read a profit matrix, one strategy per line.

        Blank lines are ignored. Row lengths are not checked here; the
        criteria reject ragged matrices themselves.
        """
        rows = [(line_no, row) for line_no, row in enumerate(self.read_all(filename), 1) if row]
        if skip_header:
            rows = rows[1:]

        matrix = []
        for line_no, row in rows:
            try:
                matrix.append([float(cell) for cell in row])
            except ValueError as exc:
                raise InvalidMatrixError(f"{filename}: non-numeric value on line {line_no}") from exc
        return matrix

    def write_results(self, filename: str, results: List[Dict[str, Any]]):
        """Write criterion results, overwriting the file if it exists."""
        self._ensure_data_dir_exists()
        file_path = self._get_file_path(filename)
        with open(file_path, 'w', newline='') as f:
            writer = csv.DictWriter(f, fieldnames=RESULT_FIELDS)
            writer.writeheader()
            writer.writerows(results)
