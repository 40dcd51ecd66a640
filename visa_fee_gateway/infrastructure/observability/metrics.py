"""Prometheus metrics for monitoring calculations and schedule loading"""

from prometheus_client import Counter, Histogram, Gauge

# Calculation metrics
calculation_counter = Counter(
    "visa_fee_calculation_total",
    "Total fee calculations performed",
    ["payment_method", "record_found"],
)

calculation_total_histogram = Histogram(
    "visa_fee_calculation_amount",
    "Calculated application totals",
    buckets=[0, 500, 1000, 2000, 5000, 10000, 20000, 50000],
)

# Schedule metrics
schedule_refresh_failures_counter = Counter(
    "schedule_refresh_failures_total",
    "Failed rate schedule fetches",
)

unparsable_charge_counter = Counter(
    "schedule_unparsable_charge_total",
    "Rate fields that could not be parsed and defaulted to 0",
    ["field"],
)

schedule_records_gauge = Gauge(
    "schedule_records_loaded",
    "Number of visa subclasses in the current schedule snapshot",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(payment_method: str, record_found: bool, total: float) -> None:
    """Record calculation metrics for usage by payment method and schedule coverage"""
    calculation_counter.labels(
        payment_method=payment_method,
        record_found="yes" if record_found else "no",
    ).inc()

    if record_found:
        calculation_total_histogram.observe(total)
