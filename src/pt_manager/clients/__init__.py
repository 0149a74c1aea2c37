"""Input clients for pt-manager."""
