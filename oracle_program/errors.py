"""Batch-fatal errors. Item-level problems are logged and skipped instead."""


class BatchError(Exception):
    """Error that aborts a whole phase and is reported to the host."""


class InputDecodeError(BatchError):
    """Task input is not valid UTF-8."""


class NoQueriesError(BatchError):
    """Task input contained no asset queries."""


class NoValidRevealsError(BatchError):
    """None of the reveals could be decoded."""
