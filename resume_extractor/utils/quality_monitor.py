import numpy as np
import logging
from datetime import datetime
from typing import Dict, List, Any, Optional
import json
from pathlib import Path

from resume_extractor.core.data_models import DocumentOutcome

logger = logging.getLogger(__name__)

# Output fields that count as empty when they hold "" or []
TRACKED_FIELDS = (
    "firstName", "middleName", "lastName", "fatherName", "phoneNumber",
    "primaryEmail", "otherEmails", "qualifications", "skills", "city", "state",
)


class QualityMonitor:
    def __init__(self, log_dir: Optional[str] = None):
        """Initialize the quality monitor; reports are saved only when log_dir is given."""
        self.log_dir = Path(log_dir) if log_dir else None
        self.reset()

    def log_extraction(self, outcome: DocumentOutcome, duration: float = 0.0):
        """Record the outcome of one document"""
        self.metrics["total_processed"] += 1
        self.metrics["extraction_times"].append(duration)

        if not outcome.ok:
            self.metrics["failed_extractions"] += 1
            self.error_files[outcome.document_id] = outcome.error
        else:
            self.metrics["successful_extractions"] += 1
            fields = outcome.to_dict()
            for field in TRACKED_FIELDS:
                if not fields.get(field):
                    self.metrics["empty_fields"][field] = self.metrics["empty_fields"].get(field, 0) + 1

        self.metrics["success_rate"] = (
            self.metrics["successful_extractions"] / self.metrics["total_processed"] * 100
        )

    def get_error_files(self) -> Dict[str, str]:
        """Documents that failed, with their error message"""
        return dict(self.error_files)

    def get_field_fill_rate(self, field: str) -> float:
        """Share of successful documents where a field was filled"""
        successful = self.metrics["successful_extractions"]
        if not successful:
            return 0.0
        return 1.0 - self.metrics["empty_fields"].get(field, 0) / successful

    def generate_report(self) -> Dict[str, Any]:
        """Summarize everything logged so far, saving it when a log dir is set"""
        times: List[float] = self.metrics["extraction_times"]
        report_dict = {
            "timestamp": datetime.now().isoformat(),
            "summary": {
                "total_processed": self.metrics["total_processed"],
                "successful_extractions": self.metrics["successful_extractions"],
                "failed_extractions": self.metrics["failed_extractions"],
                "success_rate": self.metrics["success_rate"],
                "avg_extraction_time": float(np.mean(times)) if times else 0.0,
                "max_extraction_time": float(np.max(times)) if times else 0.0,
            },
            "field_analysis": {
                "empty_fields": dict(self.metrics["empty_fields"]),
                "fill_rate": {field: self.get_field_fill_rate(field) for field in TRACKED_FIELDS},
            },
            "errors": self.get_error_files(),
        }

        if self.log_dir:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            report_file = self.log_dir / f"quality_report_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"
            with open(report_file, 'w', encoding='utf-8') as f:
                json.dump(report_dict, f, indent=2)
            logger.info(f"Quality Report Generated: {report_file}")

        logger.info(f"Total Processed: {self.metrics['total_processed']}")
        logger.info(f"Success Rate: {self.metrics['success_rate']:.2f}%")
        return report_dict

    def reset(self):
        """Reset all metrics"""
        self.metrics = {
            "total_processed": 0,
            "successful_extractions": 0,
            "failed_extractions": 0,
            "success_rate": 0.0,
            "extraction_times": [],
            "empty_fields": {},
        }
        self.error_files: Dict[str, str] = {}
