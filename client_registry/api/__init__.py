"""HTTP API: health checks and resource endpoints."""
