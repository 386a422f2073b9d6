"""Sample data for the flight filter."""
