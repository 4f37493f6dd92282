"""Command-line entry points for initializr-wizard."""
