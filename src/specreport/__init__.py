"""Turn a completed test-suite execution result into an HTML report."""

__version__ = "0.1.0"
