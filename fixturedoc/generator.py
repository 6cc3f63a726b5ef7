"""
Fixture documentation generator - run orchestration.

Ties together constant table construction, record assembly and record
writing. The constant table is complete before the first record is
assembled, since descriptions may reference constants of any class.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional

from fixturedoc.assembler import RecordAssembler
from fixturedoc.constants import ConstantTable
from fixturedoc.schemas import ClassModel, ClassRecord, GenerationSummary
from fixturedoc.writer import RecordWriter

logger = logging.getLogger(__name__)


class FixtureDocGenerator:
    """
    Generate fixture documentation records.

    Orchestrates the run:
    1. Build the constant table from all classes
    2. Assemble one record per class (nested classes included)
    3. Write the records, one JSON file each
    """

    def __init__(self, output_dir: Path, ignored_methods: Optional[Iterable[str]] = None):
        """
        Initialize the generator.

        Args:
            output_dir: Directory receiving the JSON records
            ignored_methods: Method names never documented (default: built-in set)
        """
        self.output_dir = Path(output_dir)
        self.ignored_methods = ignored_methods
        self.writer = RecordWriter(self.output_dir)

    def assemble(self, classes: Iterable[ClassModel]) -> List[ClassRecord]:
        """Assemble the records of all classes without writing them."""
        classes = list(classes)
        constants = ConstantTable.from_classes(classes)
        assembler = RecordAssembler(constants, self.ignored_methods)
        return list(assembler.assemble_all(classes))

    def generate(self, classes: Iterable[ClassModel]) -> GenerationSummary:
        """
        Run the complete generation.

        Args:
            classes: All classes of the run

        Returns:
            GenerationSummary with written paths and failed classes
        """
        classes = list(classes)
        logger.info(f"Generating fixture docs for {len(classes)} classes into {self.output_dir}")

        records = self.assemble(classes)
        written, failed = self.writer.write_all(records)

        summary = GenerationSummary(
            total_classes=len(records),
            written=[str(path) for path in written],
            failed=failed,
            output_dir=str(self.output_dir),
            timestamp=datetime.now().isoformat(),
        )

        logger.info(f"Wrote {len(written)} records, {len(failed)} failed")
        return summary


def generate_fixture_docs(
    classes: Iterable[ClassModel],
    output_dir: Path,
    ignored_methods: Optional[Iterable[str]] = None
) -> GenerationSummary:
    """
    Convenience function to generate fixture documentation.

    Example:
        >>> from fixturedoc.introspection import PythonModelAdapter
        >>> classes = PythonModelAdapter().load_modules(["shop.fixtures"])
        >>> summary = generate_fixture_docs(classes, Path("build/fixture-docs"))
        >>> print(f"Wrote {len(summary.written)} records")
    """
    return FixtureDocGenerator(output_dir, ignored_methods).generate(classes)
