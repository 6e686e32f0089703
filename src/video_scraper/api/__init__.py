"""HTTP API for video scraper."""
