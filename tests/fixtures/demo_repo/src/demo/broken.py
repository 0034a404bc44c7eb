"""Module that fails at import time."""

raise RuntimeError("demo.broken cannot be imported")
