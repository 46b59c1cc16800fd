"""FILTER-based curation and run counters."""

import logging
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

__all__ = ["PASS", "record_passes", "RunCounter"]

PASS = "PASS"


def record_passes(record: Any, enabled: bool = True) -> bool:
    """
    Check whether a record clears the FILTER column.

    A record passes when PASS is among its filters, or when FILTER is
    missing (``.``), matching htslib's ``bcf_has_filter(..., "PASS")``. With
    filtering disabled every record passes.
    """
    if not enabled:
        return True
    filters = list(record.filter.keys())
    if not filters or PASS in filters:
        return True
    logger.debug("Filtered %s:%d (%s)", record.chrom, record.start + 1, ";".join(filters))
    return False


@dataclass
class RunCounter:
    """Totals for one run. Counters only ever grow."""

    total: int = 0
    passed: int = 0

    def observe(self, passed: bool) -> None:
        self.total += 1
        if passed:
            self.passed += 1
