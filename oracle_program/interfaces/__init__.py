"""Protocol interfaces for the host environment collaborators."""
from .fetcher import HttpFetcher
from .input_source import InputSource
from .reporter import ResultReporter

__all__ = ["HttpFetcher", "InputSource", "ResultReporter"]
