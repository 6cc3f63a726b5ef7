"""
Record writer: one JSON file per class.

Directory structure:
output_dir/
├── shop.fixtures.CartFixture.json
├── shop.fixtures.CartFixture.Line.json     # nested class
└── shop.fixtures.CheckoutFixture.json

A record that cannot be written is reported and skipped; the remaining
records are still written.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Tuple

from fixturedoc.schemas import ClassRecord

logger = logging.getLogger(__name__)


class RecordWriter:
    """Write class records as ``<qualifiedName>.json`` files."""

    def __init__(self, output_dir: Path):
        """
        Initialize the record writer.

        Args:
            output_dir: Directory receiving the record files
        """
        self.output_dir = Path(output_dir)

    def record_path(self, record: ClassRecord) -> Path:
        return self.output_dir / f"{record.qualified_name}.json"

    def write(self, record: ClassRecord) -> Path:
        """
        Write a single record, replacing any previous file.

        Raises:
            OSError: If the file cannot be written
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        record_path = self.record_path(record)
        record_path.unlink(missing_ok=True)
        record_path.write_text(record.to_json(), encoding='utf-8')
        logger.debug(f"Wrote {record_path}")
        return record_path

    def write_all(self, records: Iterable[ClassRecord]) -> Tuple[List[Path], List[str]]:
        """
        Write every record, continuing past failures.

        Returns:
            Tuple of (paths written, qualified names that failed)
        """
        written = []
        failed = []

        for record in records:
            try:
                written.append(self.write(record))
            except OSError as e:
                logger.error(f"Error writing {self.record_path(record)}: {e}")
                failed.append(record.qualified_name)

        return written, failed
