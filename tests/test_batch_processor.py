import json

import pytest

from resume_extractor.core.data_models import ExtractionFailure, ExtractionSuccess, ProcessingMetrics
from resume_extractor.core.resume_parser import ResumeParser
from resume_extractor.processors.batch_processor import BatchProcessor
from resume_extractor.utils.quality_monitor import QualityMonitor


@pytest.fixture
def documents(sample_resume_text):
    return {
        "patil.pdf": sample_resume_text,
        "blank.pdf": "",
        "doe.png": "Jane Doe\njane@doe.com\n(022) 2345-6789\nAustin, Texas",
    }


@pytest.fixture
def make_processor(vocabulary_files, stub_reader_factory):
    skills_file, qualifications_file = vocabulary_files

    def _make(texts, **kwargs):
        reader = stub_reader_factory(texts)
        parser = ResumeParser(skills=skills_file, qualifications=qualifications_file, document_reader=reader)
        kwargs.setdefault("show_progress", False)
        return BatchProcessor(parser=parser, **kwargs)

    return _make


def test_process_texts(resume_parser, documents):
    processor = BatchProcessor(parser=resume_parser, show_progress=False)

    outcomes = processor.process_texts(documents)

    assert [o.document_id for o in outcomes] == ["patil.pdf", "blank.pdf", "doe.png"]
    assert all(isinstance(o, ExtractionSuccess) for o in outcomes)
    assert outcomes[0].result.name.first_name == "Rahul"
    assert outcomes[2].to_dict()["city"] == "Austin"
    assert processor.quality_monitor.metrics["successful_extractions"] == 3


def test_process_texts_accepts_pairs(resume_parser):
    processor = BatchProcessor(parser=resume_parser, show_progress=False)
    outcomes = processor.process_texts([("a", "John Smith"), ("a", "Jane Doe")])

    assert [o.result.name.first_name for o in outcomes] == ["John", "Jane"]


def test_failures_do_not_abort_batch(make_processor, documents):
    processor = make_processor(documents, num_workers=3)
    paths = ["in/patil.pdf", "in/missing.pdf", "in/doe.png", "in/blank.pdf"]

    outcomes = processor.process_files(paths)

    assert [o.document_id for o in outcomes] == ["patil.pdf", "missing.pdf", "doe.png", "blank.pdf"]
    assert [o.ok for o in outcomes] == [True, False, True, True]
    assert outcomes[1] == ExtractionFailure(document_id="missing.pdf", error="Unable to read missing.pdf")


def test_small_batches_keep_input_order(make_processor, documents):
    processor = make_processor(documents, batch_size=1, num_workers=2)
    paths = ["doe.png", "patil.pdf", "doe.png", "blank.pdf"]

    outcomes = processor.process_files(paths)

    assert [o.document_id for o in outcomes] == paths
    assert processor.parser.document_reader.calls == paths


def test_process_to_file(make_processor, documents, tmp_path):
    processor = make_processor(documents)
    output_file = tmp_path / "out" / "results"

    metrics = processor.process_to_file(["patil.pdf", "bad.pdf", "doe.png"], output_file)

    assert isinstance(metrics, ProcessingMetrics)
    assert metrics.total_files == 3
    assert metrics.processed == 2
    assert metrics.failed == 1
    assert metrics.output_file.endswith("results.json")

    written = json.loads((tmp_path / "out" / "results.json").read_text(encoding="utf-8"))
    assert written[0]["firstName"] == "Rahul"
    assert written[1] == {"file": "bad.pdf", "error": "Unable to read bad.pdf"}
    assert written[2]["phoneNumber"] == "02223456789"


def test_process_to_file_with_no_files(make_processor, tmp_path):
    processor = make_processor({})
    metrics = processor.process_to_file([], tmp_path / "empty.json")

    assert metrics.total_files == 0
    assert metrics.success_rate == 0
    assert json.loads((tmp_path / "empty.json").read_text(encoding="utf-8")) == []


def test_quality_report(make_processor, documents, tmp_path):
    monitor = QualityMonitor(log_dir=str(tmp_path / "logs"))
    processor = make_processor(documents, quality_monitor=monitor)
    processor.process_files(["patil.pdf", "blank.pdf", "gone.pdf"])

    report = processor.summary()

    assert report["summary"]["total_processed"] == 3
    assert report["summary"]["failed_extractions"] == 1
    assert report["summary"]["success_rate"] == pytest.approx(200 / 3)
    assert report["field_analysis"]["empty_fields"]["firstName"] == 1
    assert report["field_analysis"]["fill_rate"]["firstName"] == pytest.approx(0.5)
    assert report["errors"] == {"gone.pdf": "Unable to read gone.pdf"}
    assert len(list((tmp_path / "logs").glob("quality_report_*.json"))) == 1


def test_quality_monitor_reset():
    monitor = QualityMonitor()
    monitor.log_extraction(ExtractionFailure(document_id="x.pdf", error="boom"), 0.5)
    monitor.reset()

    assert monitor.metrics["total_processed"] == 0
    assert monitor.get_error_files() == {}
    assert monitor.generate_report()["summary"]["avg_extraction_time"] == 0.0


def test_quality_report_not_saved_without_log_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monitor = QualityMonitor()
    monitor.log_extraction(ExtractionFailure(document_id="x.pdf", error="boom"), 0.5)

    report = monitor.generate_report()

    assert report["errors"] == {"x.pdf": "boom"}
    assert list(tmp_path.rglob("quality_report_*.json")) == []
