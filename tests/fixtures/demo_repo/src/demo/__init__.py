"""Demo fixture package."""
