"""
Prometheus metrics for fieldrules

Metrics live on a private CollectorRegistry so importing fieldrules never
touches the global prometheus_client registry.
"""
from prometheus_client import (
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

REGISTRY = CollectorRegistry()


# Rule evaluations, one per (declaration, field) pair
rule_evaluations_total = Counter(
    name="fieldrules_rule_evaluations_total",
    documentation="Total number of rule checks evaluated",
    labelnames=["rule", "outcome"],  # outcome: passed, failed
    registry=REGISTRY,
)

# validate() calls
validations_total = Counter(
    name="fieldrules_validations_total",
    documentation="Total number of validate() runs",
    labelnames=["outcome"],  # outcome: passed, failed
    registry=REGISTRY,
)

validation_duration_seconds = Histogram(
    name="fieldrules_validation_duration_seconds",
    documentation="Time spent in validate() in seconds",
    buckets=[0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0],
    registry=REGISTRY,
)


def record_rule_evaluation(rule: str, passed: bool) -> None:
    rule_evaluations_total.labels(rule=rule, outcome="passed" if passed else "failed").inc()


def record_validation(passed: bool) -> None:
    validations_total.labels(outcome="passed" if passed else "failed").inc()


def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics in text format

    Returns:
        Metrics in Prometheus text format
    """
    return generate_latest(REGISTRY)


class track_duration:
    """
    Context manager for tracking operation duration

    Usage:
        with track_duration(validation_duration_seconds):
            # do work
            pass
    """

    def __init__(self, histogram: Histogram, **labels):
        self.histogram = histogram
        self.labels = labels
        self.timer = None

    def __enter__(self):
        """Start timer"""
        metric = self.histogram.labels(**self.labels) if self.labels else self.histogram
        self.timer = metric.time()
        self.timer.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Stop timer"""
        self.timer.__exit__(exc_type, exc_val, exc_tb)
        return False
