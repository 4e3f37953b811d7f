"""Shared utilities and telemetry helpers. No business logic."""
