"""
Integration tests for the submission pipeline.
"""

import json

import httpx
import pytest

from conftest import vcf_line
from vcfbrave.errors import EmptyDistributionError, InputFileError, SubmissionError
from vcfbrave.io.submit import CatalogClient
from vcfbrave.models.core import SubmitConfig
from vcfbrave.normalize import RecordNormalizer
from vcfbrave.pipeline import Pipeline


def recording_client(config, statuses=None):
    """CatalogClient backed by a mock transport; returns (client, requests)."""
    requests = []
    statuses = list(statuses or [])

    def handler(request):
        requests.append(request)
        status = statuses.pop(0) if statuses else 201
        return httpx.Response(status, text="rejected" if status != 201 else "")

    return CatalogClient(config, transport=httpx.MockTransport(handler)), requests


def test_dry_run_counts_without_network(ten_record_vcf):
    config = SubmitConfig(dataset_id="d", assembly_id="a", dry_run=True)
    client, requests = recording_client(config)

    summary = Pipeline(config, client=client).run(ten_record_vcf)

    assert summary.total == 10
    assert summary.passed == 7
    assert summary.submitted == 0
    assert summary.filtered
    assert requests == []


def test_unfiltered_run_passes_everything(ten_record_vcf):
    config = SubmitConfig(dataset_id="d", assembly_id="a", dry_run=True, filter_variants=False)
    summary = Pipeline(config).run(ten_record_vcf)
    assert summary.total == summary.passed == 10
    assert not summary.filtered


def test_submits_in_input_order(ten_record_vcf):
    config = SubmitConfig(dataset_id="d", assembly_id="a")
    client, requests = recording_client(config)

    with client:
        summary = Pipeline(config, client=client).run(ten_record_vcf)

    assert summary.submitted == 7
    starts = [json.loads(r.content)["start"] for r in requests]
    assert starts == [100, 110, 130, 140, 160, 170, 190]


def test_failed_submission_aborts_run(write_vcf, monkeypatch):
    path = write_vcf([vcf_line(pos=100 + i) for i in range(4)])
    config = SubmitConfig(dataset_id="d", assembly_id="a")
    client, requests = recording_client(config, statuses=[201, 500])

    normalized = []
    original = RecordNormalizer.normalize

    def spy(self, record):
        normalized.append(record.pos)
        return original(self, record)

    monkeypatch.setattr(RecordNormalizer, "normalize", spy)

    with client, pytest.raises(SubmissionError, match="rejected"):
        Pipeline(config, client=client).run(path)

    assert len(requests) == 2
    assert normalized == [100, 101]


def test_malformed_record_aborts_run(write_vcf):
    path = write_vcf(
        [
            vcf_line(pos=100),
            vcf_line(pos=200, samples=("0/1:10:.", "0/0:20:.", "1/1:30:.")),
            vcf_line(pos=300),
        ]
    )
    config = SubmitConfig(dataset_id="d", assembly_id="a")
    client, requests = recording_client(config)

    with client, pytest.raises(EmptyDistributionError):
        Pipeline(config, client=client).run(path)

    assert len(requests) == 1


def test_filtered_record_is_not_normalized(write_vcf):
    # Would fail normalization, but FILTER drops it first
    path = write_vcf(
        [
            vcf_line(pos=100, filt="LowQual", samples=("0/1:.:.", "0/0:.:.", "1/1:.:.")),
            vcf_line(pos=200),
        ]
    )
    config = SubmitConfig(dataset_id="d", assembly_id="a", dry_run=True)
    summary = Pipeline(config).run(path)
    assert (summary.total, summary.passed) == (2, 1)


def test_missing_input_file(tmp_path):
    config = SubmitConfig(dataset_id="d", assembly_id="a", dry_run=True)
    with pytest.raises(InputFileError):
        Pipeline(config).run(tmp_path / "missing.vcf")


def test_unreadable_input_file(tmp_path):
    path = tmp_path / "garbage.vcf"
    path.write_text("this is not a variant file\n")
    config = SubmitConfig(dataset_id="d", assembly_id="a", dry_run=True)
    with pytest.raises(InputFileError):
        Pipeline(config).run(path)
