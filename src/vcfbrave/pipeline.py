"""
Pipeline Orchestrator: Manages the execution flow of vcfbrave.

This module handles:
1. Reading records from the input VCF/BCF.
2. Applying the FILTER check and counting records.
3. Normalizing each passing record into a Variant.
4. Submitting each Variant to the catalog (skipped in dry-run mode).

Processing is sequential and fail-fast: the first error aborts the run, and
variants already submitted stay in the catalog.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from .counter import RunCounter, record_passes
from .io.input import VcfReader
from .io.submit import CatalogClient
from .models.core import SubmitConfig
from .normalize import SAMPLE_COUNT, RecordNormalizer
from .utils.logging import timed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunSummary:
    """Final counts of a run."""

    total: int
    passed: int
    submitted: int
    filtered: bool


class Pipeline:
    """
    Args:
        config: Run configuration.
        client: Catalog client to submit with; built from ``config`` when
            omitted. Never used in dry-run mode.
    """

    def __init__(self, config: SubmitConfig, client: CatalogClient | None = None):
        self.config = config
        self.client = client

    def run(self, variant_file: Path) -> RunSummary:
        """Execute the pipeline over ``variant_file``."""
        with timed(f"Processing {variant_file}", logger), VcfReader(variant_file) as reader:
            normalizer = RecordNormalizer(
                self.config,
                total_samples=reader.sample_count,
                has_sample_count=reader.has_info(SAMPLE_COUNT),
            )
            logger.info(
                "Read header of [bold]%s[/bold]: %d samples", variant_file, reader.sample_count
            )

            if self.config.dry_run:
                logger.info("Dry run: nothing will be sent to %s", self.config.host)
                return self._process(reader, normalizer, None)

            if self.client is not None:
                return self._process(reader, normalizer, self.client)
            with CatalogClient(self.config) as client:
                return self._process(reader, normalizer, client)

    def _process(
        self,
        reader: VcfReader,
        normalizer: RecordNormalizer,
        client: CatalogClient | None,
    ) -> RunSummary:
        counter = RunCounter()
        submitted = 0

        for record in reader:
            passed = record_passes(record, self.config.filter_variants)
            counter.observe(passed)
            if not passed:
                continue

            variant = normalizer.normalize(record)

            if self.config.debug:
                logger.debug("%r", variant, extra={"markup": False})

            if client is None:
                continue

            client.submit(variant)
            submitted += 1

        logger.info(
            "Processed %d records, %d passed, %d submitted",
            counter.total,
            counter.passed,
            submitted,
        )
        return RunSummary(
            total=counter.total,
            passed=counter.passed,
            submitted=submitted,
            filtered=self.config.filter_variants,
        )
