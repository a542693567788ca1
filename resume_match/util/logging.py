"""
Structured logging for resume ingestion, search and vector operations.
"""

import logging
from typing import Any, Dict, List


class StructuredLogger:
    """Structured logger for ingest, search and vector operations."""

    def __init__(self, name: str = "resume_match"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.INFO)

        # Create handler if not already set
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def log_operation(self, operation: str, status: str, details: Dict[str, Any] = None):
        """Log a structured operation."""
        message = f"Operation: {operation}, Status: {status}"
        if details:
            message += f", Details: {details}"

        self.logger.info(message)

    def log_ingest(self, resume_id: str, file_name: str = None, text_length: int = 0, status: str = "success"):
        """Log a resume ingestion."""
        details = {"resume_id": resume_id, "text_length": text_length}
        if file_name:
            details["file_name"] = file_name[:50] + "..." if len(file_name) > 50 else file_name

        self.log_operation("resume.ingest", status, details)

    def log_search(self, query: str, top_k: int, candidates: int, returned: int, status: str = "success"):
        """Log a search request without echoing the full query text."""
        details = {
            "query": query[:50] + "..." if len(query) > 50 else query,
            "top_k": top_k,
            "candidates": candidates,
            "returned": returned,
        }
        self.log_operation("resume.search", status, details)

    def log_vector_operation(self, operation: str, record_id: str, details: Dict[str, Any] = None, status: str = "success"):
        """Log a vector operation."""
        log_details = {"record_id": record_id}
        if details:
            log_details.update(details)

        self.log_operation(f"vector.{operation}", status, log_details)

    def log_degraded_vector(self, record_id: str, reason: str):
        """Log a stored vector that could not be compared and was scored 0."""
        details = {"record_id": record_id, "reason": reason}
        self.logger.warning(f"Operation: vector.degraded, Status: scored_zero, Details: {details}")

    def log_config_issues(self, issues: List[str]):
        """Log configuration problems found at startup."""
        for issue in issues:
            self.logger.warning(f"Config issue: {issue}")

    # Standard logging methods for compatibility
    def info(self, message: str) -> None:
        """Log an info message."""
        self.logger.info(message)

    def warning(self, message: str) -> None:
        """Log a warning message."""
        self.logger.warning(message)

    def error(self, message: str) -> None:
        """Log an error message."""
        self.logger.error(message)

    def debug(self, message: str) -> None:
        """Log a debug message."""
        self.logger.debug(message)


# Global logger instance
logger = StructuredLogger()
