#!/usr/bin/env python3
"""
Main script to extract fields from all scanned resumes in a directory
Usage: python process_resumes.py --input-dir data/input --output-dir data/output
"""

import click
from pathlib import Path
import json
from datetime import datetime
import logging
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from resume_extractor.core.resume_parser import ResumeParser
from resume_extractor.processors.batch_processor import BatchProcessor
from resume_extractor.utils.quality_monitor import QualityMonitor
from config.logging_config import setup_logging
from config.settings import settings

logger = logging.getLogger(__name__)


def find_resume_files(input_path: Path):
    resume_files = []
    for ext in settings.SUPPORTED_FORMATS:
        resume_files.extend(input_path.glob(f'**/*.{ext}'))
    return sorted(set(resume_files))


@click.command()
@click.option('--input-dir', default=str(settings.INPUT_DIR), help='Input directory with resumes')
@click.option('--output-dir', default=str(settings.OUTPUT_DIR), help='Output directory for JSON')
@click.option('--batch-size', default=settings.BATCH_SIZE, help='Batch size for processing')
@click.option('--num-workers', default=settings.NUM_WORKERS, help='Number of parallel workers')
@click.option('--skills-file', default=str(settings.SKILLS_FILE), help='Skill vocabulary, one term per line')
@click.option('--qualifications-file', default=str(settings.QUALIFICATIONS_FILE),
              help='Qualification vocabulary, one term per line')
@click.option('--report/--no-report', default=True, help='Write a quality report to the log directory')
@click.option('--log-level', default='INFO', help='Logging level')
def main(input_dir: str,
         output_dir: str,
         batch_size: int,
         num_workers: int,
         skills_file: str,
         qualifications_file: str,
         report: bool,
         log_level: str):
    """Extract candidate fields from every resume in the input directory"""
    setup_logging(log_level.upper())

    start_time = datetime.now()
    logger.info(f"Starting resume processing at {start_time}")

    input_path = Path(input_dir)
    output_path = Path(output_dir)
    output_path.mkdir(exist_ok=True, parents=True)

    resume_files = find_resume_files(input_path)
    logger.info(f"Found {len(resume_files)} resume files")

    if not resume_files:
        logger.error("No resume files found!")
        sys.exit(1)

    parser = ResumeParser(skills=Path(skills_file), qualifications=Path(qualifications_file))
    processor = BatchProcessor(
        parser=parser,
        batch_size=batch_size,
        num_workers=num_workers,
        quality_monitor=QualityMonitor(log_dir=str(settings.LOG_DIR) if report else None)
    )

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    output_file = output_path / f"resumes_{timestamp}.json"
    metrics = processor.process_to_file(resume_files, output_file)

    summary = metrics.model_dump()
    summary["timestamp"] = timestamp
    summary["errors"] = processor.quality_monitor.get_error_files()
    if report:
        processor.summary()

    summary_file = output_path / f"processing_summary_{timestamp}.json"
    with open(summary_file, 'w', encoding='utf-8') as f:
        json.dump(summary, f, indent=2)

    click.echo(f"Processed {metrics.processed}/{metrics.total_files} resumes "
               f"({metrics.failed} failed) -> {output_file}")
    logger.info("Processing complete!")


if __name__ == "__main__":
    main()
