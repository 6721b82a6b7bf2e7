"""Services for urshort."""
