from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Generator, Iterable, List, Mapping, Optional, Tuple, Union
import psutil
import gc
from pathlib import Path
import json
import time
from tqdm import tqdm
import logging
from datetime import datetime

from resume_extractor.core.data_models import (
    DocumentOutcome,
    ExtractionFailure,
    ExtractionSuccess,
    ProcessingMetrics,
)
from resume_extractor.core.resume_parser import ResumeParser
from resume_extractor.utils.quality_monitor import QualityMonitor
from config.settings import settings

logger = logging.getLogger(__name__)


class BatchProcessor:
    """Memory-aware batch processing; one outcome per document, in input order"""

    def __init__(self,
                 parser: Optional[ResumeParser] = None,
                 batch_size: int = None,
                 num_workers: int = None,
                 max_memory_percent: int = None,
                 quality_monitor: Optional[QualityMonitor] = None,
                 show_progress: bool = True):
        self.parser = parser or ResumeParser()
        self.batch_size = batch_size or settings.BATCH_SIZE
        self.num_workers = num_workers or settings.NUM_WORKERS
        self.max_memory_percent = max_memory_percent or settings.MAX_MEMORY_PERCENT
        self.quality_monitor = quality_monitor or QualityMonitor()
        self.show_progress = show_progress

    def _process_single(self, file_path: Union[str, Path]) -> Tuple[DocumentOutcome, float]:
        """Process single resume in worker"""
        start = time.perf_counter()
        try:
            outcome = self.parser.parse_resume_file(file_path)
        except Exception as e:
            logger.error(f"Error processing {file_path}: {e}")
            outcome = ExtractionFailure(document_id=Path(file_path).name, error=str(e) or type(e).__name__)
        return outcome, time.perf_counter() - start

    def check_memory(self):
        """Monitor and manage memory usage"""
        memory_percent = psutil.virtual_memory().percent

        if memory_percent > self.max_memory_percent:
            logger.warning(f"High memory usage: {memory_percent}%")
            gc.collect()

            # If still high, reduce workers for the next batch
            if memory_percent > 90:
                self.num_workers = max(1, self.num_workers - 1)
                logger.warning(f"Reduced workers to {self.num_workers}")

    def process_batch_generator(self,
                                file_paths: List[Union[str, Path]]) -> Generator[DocumentOutcome, None, None]:
        """Process files as a generator to save memory"""
        for i in range(0, len(file_paths), self.batch_size):
            batch = file_paths[i:i + self.batch_size]

            with ThreadPoolExecutor(max_workers=self.num_workers) as executor:
                futures = [executor.submit(self._process_single, fp) for fp in batch]

                for future in tqdm(
                    futures,
                    total=len(futures),
                    desc=f"Batch {i // self.batch_size + 1}",
                    disable=not self.show_progress
                ):
                    outcome, duration = future.result()
                    self.quality_monitor.log_extraction(outcome, duration)
                    yield outcome

            self.check_memory()
            # Force garbage collection after each batch
            gc.collect()

    def process_files(self, file_paths: Iterable[Union[str, Path]]) -> List[DocumentOutcome]:
        return list(self.process_batch_generator(list(file_paths)))

    def process_texts(self,
                      documents: Union[Mapping[str, str], Iterable[Tuple[str, str]]]) -> List[ExtractionSuccess]:
        """Extract fields from already-recognized texts keyed by document id"""
        items = documents.items() if isinstance(documents, Mapping) else documents
        outcomes = []
        for document_id, text in items:
            start = time.perf_counter()
            outcome = self.parser.parse_document_text(document_id, text)
            self.quality_monitor.log_extraction(outcome, time.perf_counter() - start)
            outcomes.append(outcome)
        return outcomes

    def process_to_file(self,
                        file_paths: List[Union[str, Path]],
                        output_file: Path) -> ProcessingMetrics:
        """Process files and save results to JSON file"""
        start_time = datetime.now()
        total_files = len(file_paths)
        processed = 0
        failed = 0

        output_file = Path(output_file)
        # Ensure output file has .json extension
        if not output_file.suffix:
            output_file = output_file.with_suffix('.json')
        output_file.parent.mkdir(parents=True, exist_ok=True)

        with open(output_file, 'w', encoding='utf-8') as f:
            f.write('[\n')  # Start JSON array
            first = True

            for outcome in self.process_batch_generator(list(file_paths)):
                # Write to file immediately to save memory
                if not first:
                    f.write(',\n')
                json.dump(outcome.to_dict(), f, indent=2)
                first = False

                if outcome.ok:
                    processed += 1
                else:
                    failed += 1

                if (processed + failed) % 100 == 0:
                    logger.info(
                        f"Progress: {processed + failed}/{total_files} "
                        f"({(processed + failed) / total_files * 100:.1f}%)"
                    )

            f.write('\n]')  # End JSON array

        duration = (datetime.now() - start_time).total_seconds()
        metrics = ProcessingMetrics(
            total_files=total_files,
            processed=processed,
            failed=failed,
            success_rate=processed / total_files * 100 if total_files > 0 else 0,
            processing_time=duration,
            files_per_second=total_files / duration if duration > 0 else 0,
            memory_usage=psutil.virtual_memory().percent,
            output_file=str(output_file),
        )

        logger.info(f"Processing complete: {metrics.model_dump()}")
        return metrics

    def summary(self) -> Dict:
        return self.quality_monitor.generate_report()
