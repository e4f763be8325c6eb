"""Multi-asset price oracle program: execution and tally phases."""
__version__ = "0.1.0"
