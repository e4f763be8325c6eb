"""Execution phase: fetch and price every asset query in the task input."""
from __future__ import annotations

import logging

from ..config import DataSourceConfig
from ..errors import BatchError
from ..interfaces.fetcher import HttpFetcher
from ..interfaces.input_source import InputSource
from ..interfaces.reporter import ResultReporter
from ..models import PriceResult
from ..pricing import assemble_results, encode_results, interpret_response
from ..query import build_request, decode_input, parse_query, split_queries

logger = logging.getLogger(__name__)


class ExecutionPhase:
    """Prices a batch of asset queries and reports one canonical result array.

    Queries are resolved one after another. A query that cannot be parsed,
    built, fetched or priced is logged and left out of the result; only an
    input without any queries fails the batch.
    """

    def __init__(
        self,
        inputs: InputSource,
        fetcher: HttpFetcher,
        reporter: ResultReporter,
        config: DataSourceConfig,
    ) -> None:
        self._inputs = inputs
        self._fetcher = fetcher
        self._reporter = reporter
        self._base_url = config.base_url

    async def _resolve(self, segment: str) -> PriceResult | None:
        """Resolve one query segment to a price, or None if it is skipped."""
        query = parse_query(segment)
        if query is None:
            return None

        request = build_request(query, self._base_url)
        if request is None:
            return None

        logger.debug("Fetching from URL: %s", request.url)
        response = await self._fetcher.fetch(request.url)

        price = interpret_response(response, request.expected_key)
        if price is None:
            logger.debug("Skipping query %s (key: %s)", segment, request.expected_key)
            return None

        return PriceResult(symbol_key=request.expected_key, price=price)

    async def collect_prices(self, raw_input: bytes) -> list[PriceResult]:
        """Resolve all queries in ``raw_input`` and return them sorted.

        Raises:
            BatchError: if the input is not UTF-8 or holds no queries.
        """
        text = decode_input(raw_input)
        logger.info("Fetching data for: %s", text)

        results: list[PriceResult] = []
        for segment in split_queries(text):
            result = await self._resolve(segment)
            if result is not None:
                results.append(result)

        return assemble_results(results)

    async def run(self) -> None:
        """Run the phase and report exactly one outcome."""
        try:
            results = await self.collect_prices(self._inputs.get_inputs())
        except BatchError as e:
            logger.error("Execution phase failed: %s", e)
            self._reporter.error(str(e).encode("utf-8"))
            return

        output = encode_results(results)
        logger.info("Reporting: %s", output.decode("utf-8"))
        self._reporter.success(output)


async def run_execution_phase(
    inputs: InputSource,
    fetcher: HttpFetcher,
    reporter: ResultReporter,
    config: DataSourceConfig,
) -> None:
    """Convenience wrapper: build an :class:`ExecutionPhase` and run it."""
    await ExecutionPhase(inputs, fetcher, reporter, config).run()
