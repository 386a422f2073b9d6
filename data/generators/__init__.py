"""Sample dataset generators."""
