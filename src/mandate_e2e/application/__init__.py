"""Call tests driving the gateway API, and the continuation gate."""

from .continuation import ContinuationGate
from .customers import create_customer_call_test
from .payments import (
    capture_call_test,
    cit_for_mandates_call_test,
    mit_for_mandates_call_test,
)

__all__ = [
    "ContinuationGate",
    "capture_call_test",
    "cit_for_mandates_call_test",
    "create_customer_call_test",
    "mit_for_mandates_call_test",
]
