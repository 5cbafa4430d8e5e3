"""End-to-end mandate flow suites for a payment gateway."""

__version__ = "0.1.0"
