"""Local harness around the secret guard.

Provides typed settings, structured logging, report models and a click CLI
that drive a single SecretGuard the way its test suite does.
"""
