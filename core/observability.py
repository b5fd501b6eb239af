"""Observability Module - Logging, Tracing, and Metrics

This module provides:
1. Structured logging setup
2. Per-turn dialogue tracing
3. Conversation metrics collection (categories, stages, latency)
"""
import time
import logging
from typing import Dict, Any, Optional
from dataclasses import dataclass, field
from datetime import datetime
from config.settings import LOG_LEVEL

logger = logging.getLogger("mindease")

LOG_FORMAT = '%(asctime)s | %(name)s | %(levelname)s | %(message)s'
LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'


def configure_logging(level: str = LOG_LEVEL):
    """Configure structured logging for scripts and the console chat."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT
    )


@dataclass
class TurnTrace:
    """Represents a single dialogue turn trace."""
    session_id: str
    start_time: datetime = field(default_factory=datetime.now)
    end_time: Optional[datetime] = None
    duration_ms: Optional[float] = None
    stage_before: Optional[str] = None
    stage_after: Optional[str] = None
    category: Optional[str] = None
    success: bool = True
    error: Optional[str] = None

    def complete(self, success: bool = True, error: str = None):
        """Mark trace as complete."""
        self.end_time = datetime.now()
        self.duration_ms = (self.end_time - self.start_time).total_seconds() * 1000
        self.success = success
        self.error = error


@dataclass
class DialogueMetrics:
    """Aggregated metrics across conversation turns."""
    total_turns: int = 0
    failed_turns: int = 0
    total_latency_ms: float = 0
    category_counts: Dict[str, int] = field(default_factory=dict)
    stage_entries: Dict[str, int] = field(default_factory=dict)

    @property
    def avg_latency_ms(self) -> float:
        if self.total_turns == 0:
            return 0.0
        return self.total_latency_ms / self.total_turns

    def record(self, trace: TurnTrace):
        """Record a trace into metrics."""
        self.total_turns += 1
        if not trace.success:
            self.failed_turns += 1

        if trace.duration_ms:
            self.total_latency_ms += trace.duration_ms

        if trace.category:
            self.category_counts[trace.category] = self.category_counts.get(trace.category, 0) + 1

        if trace.stage_after and trace.stage_after != trace.stage_before:
            self.stage_entries[trace.stage_after] = self.stage_entries.get(trace.stage_after, 0) + 1

    def reset(self):
        self.total_turns = 0
        self.failed_turns = 0
        self.total_latency_ms = 0
        self.category_counts = {}
        self.stage_entries = {}

    def summary(self) -> Dict[str, Any]:
        """Return metrics summary."""
        return {
            "total_turns": self.total_turns,
            "failed_turns": self.failed_turns,
            "avg_latency_ms": f"{self.avg_latency_ms:.0f}ms",
            "categories": dict(self.category_counts),
            "stage_entries": dict(self.stage_entries),
        }


# Global metrics instance
metrics = DialogueMetrics()


class Tracer:
    """Context manager for tracing one dialogue turn."""

    def __init__(self, session_id: str, stage_before: str = None):
        self.trace = TurnTrace(session_id=session_id, stage_before=stage_before)
        self._started = time.perf_counter()

    def __enter__(self):
        logger.debug(f"▶ turn started ({self.trace.session_id}, stage={self.trace.stage_before})")
        return self.trace

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type:
            self.trace.complete(success=False, error=str(exc_val))
            logger.error(f"✖ turn failed ({self.trace.session_id}): {exc_val}")
        else:
            self.trace.complete(success=True)
            self.trace.duration_ms = (time.perf_counter() - self._started) * 1000
            logger.info(
                f"✔ {self.trace.session_id}: {self.trace.category} "
                f"{self.trace.stage_before} → {self.trace.stage_after} "
                f"in {self.trace.duration_ms:.0f}ms"
            )

        metrics.record(self.trace)
        return False  # Don't suppress exceptions


def get_metrics_summary() -> Dict[str, Any]:
    """Get current metrics summary."""
    return metrics.summary()
