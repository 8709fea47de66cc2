"""Monitoring configuration for the practice engine."""
from prometheus_client import Counter, Histogram, start_http_server

# Session metrics
sessions_started = Counter(
    "suomiarena_sessions_started_total",
    "Total number of practice sessions started",
    ["mode"],
)

sessions_completed = Counter(
    "suomiarena_sessions_completed_total",
    "Total number of practice sessions completed",
    ["mode"],
)

perfect_completions = Counter(
    "suomiarena_perfect_completions_total",
    "Total number of sessions completed without a wrong answer",
    ["mode"],
)

session_duration = Histogram(
    "suomiarena_session_duration_seconds",
    "Duration of completed practice sessions in seconds",
    ["mode"],
    buckets=[30, 60, 120, 300, 600, 1800],  # 30s, 1min, 2min, 5min, 10min, 30min
)

# Answer metrics
answers_submitted = Counter(
    "suomiarena_answers_submitted_total",
    "Total number of answers checked",
    ["mode", "result"],
)

# Persistence metrics
persistence_errors = Counter(
    "suomiarena_persistence_errors_total",
    "Total number of failed progress reads or writes",
    ["target", "operation"],
)


def start_monitoring(port: int = 9090) -> None:
    """Start the Prometheus metrics server."""
    start_http_server(port)
