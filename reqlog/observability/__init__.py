"""HTTP request logging: structlog setup, the log line format and the timing middleware."""
