"""Command-line interface for the flight filter."""
