"""Prometheus metrics for barcode encode/decode outcomes and validation failures"""

from prometheus_client import Counter, Histogram

encode_counter = Counter(
    "virtual_barcode_encode_total",
    "Barcode encode attempts",
    ["outcome"],  # success | rejected
)

decode_counter = Counter(
    "virtual_barcode_decode_total",
    "Barcode decode attempts",
    ["outcome"],  # success | rejected
)

validation_failure_counter = Counter(
    "virtual_barcode_validation_failures_total",
    "Rejected input fields",
    ["field", "reason"],
)

encode_duration_histogram = Histogram(
    "virtual_barcode_encode_duration_seconds",
    "Time spent validating and encoding a barcode",
    buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05],
)


def record_encode(succeeded: bool, duration_seconds: float) -> None:
    encode_counter.labels(outcome="success" if succeeded else "rejected").inc()
    encode_duration_histogram.observe(duration_seconds)


def record_decode(succeeded: bool) -> None:
    decode_counter.labels(outcome="success" if succeeded else "rejected").inc()


def record_validation_failure(field: str, reason: str) -> None:
    """Count a rejected field so form problems show up per field and reason"""
    validation_failure_counter.labels(field=field, reason=reason).inc()
