"""Tally phase: reduce the reveals of independent executors to one result.

Agreement is deliberately relaxed: the first reveal that decodes is accepted
as-is and the others are not compared against it, since prices fetched at
slightly different times rarely match exactly.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable

from ..errors import BatchError, NoValidRevealsError
from ..interfaces.input_source import InputSource
from ..interfaces.reporter import ResultReporter
from ..models import DecodedReveal, PriceResult, RevealOutcome, UndecodableReveal
from ..pricing import decode_results, encode_results

logger = logging.getLogger(__name__)


def decode_reveal(body: bytes) -> RevealOutcome:
    """Decode one reveal body into a tagged outcome."""
    try:
        return DecodedReveal(results=tuple(decode_results(body)))
    except ValueError as e:
        return UndecodableReveal(reason=str(e))


def reduce_reveals(bodies: Iterable[bytes]) -> list[PriceResult]:
    """Return the results of the first decodable reveal.

    Raises:
        NoValidRevealsError: if no reveal decodes.
    """
    accepted: DecodedReveal | None = None
    valid = 0
    for index, body in enumerate(bodies):
        outcome = decode_reveal(body)
        if isinstance(outcome, UndecodableReveal):
            logger.warning(
                "Reveal %d could not be parsed as a result array: %s",
                index,
                outcome.reason,
            )
            continue
        valid += 1
        if accepted is None:
            accepted = outcome

    if accepted is None:
        raise NoValidRevealsError("No valid reveals")

    logger.info("Accepting first of %d valid reveal(s)", valid)
    return list(accepted.results)


class TallyPhase:
    """Reduces peer reveals and reports exactly one outcome."""

    def __init__(self, inputs: InputSource, reporter: ResultReporter) -> None:
        self._inputs = inputs
        self._reporter = reporter

    def run(self) -> None:
        reveals = self._inputs.get_reveals()
        try:
            results = reduce_reveals(reveal.body for reveal in reveals)
        except BatchError as e:
            logger.error("Tally phase failed: %s", e)
            self._reporter.error(str(e).encode("utf-8"))
            return

        output = encode_results(results)
        logger.info("Returning first valid result: %s", output.decode("utf-8"))
        self._reporter.success(output)


def run_tally_phase(inputs: InputSource, reporter: ResultReporter) -> None:
    """Convenience wrapper: build a :class:`TallyPhase` and run it."""
    TallyPhase(inputs, reporter).run()
