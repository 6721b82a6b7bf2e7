"""urshort API routes."""
