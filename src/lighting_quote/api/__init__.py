"""API subpackage - FastAPI surface for the quote engine."""
