"""urshort web application."""
