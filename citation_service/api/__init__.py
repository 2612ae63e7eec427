"""HTTP API for citation-service."""
