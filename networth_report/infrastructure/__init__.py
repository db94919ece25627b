"""Infrastructure adapters: database, settings, logging and PDF output."""
