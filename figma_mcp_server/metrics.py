"""
Prometheus registry of the server.

Collectors are declared next to the code that updates them and registered
here through ``registry=app_registry``; ``metrics://prometheus`` exposes
whatever has been imported.
"""
from prometheus_client import CollectorRegistry, generate_latest

app_registry = CollectorRegistry()


def get_metrics() -> bytes:
    """Returns metrics in the Prometheus text format."""
    return generate_latest(app_registry)
