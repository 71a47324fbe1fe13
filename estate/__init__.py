"""Property management service: persistence, services and HTTP API."""
