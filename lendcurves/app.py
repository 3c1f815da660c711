"""Command-line entry point: aggregate rate rows and print them as JSON."""

import asyncio
import json
import logging
import sys
from typing import List

from config.settings import get_settings
from lendcurves.core.models import ProtocolDataRow
from lendcurves.data.aggregator import create_aggregator

logger = logging.getLogger(__name__)


async def fetch_rows() -> List[ProtocolDataRow]:
    """Run one aggregation with the configured protocols."""
    aggregator = create_aggregator(get_settings())
    try:
        return await aggregator.aggregate()
    finally:
        await aggregator.close()


def main():
    settings = get_settings()
    logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.WARNING))

    rows = asyncio.run(fetch_rows())
    if not rows:
        logger.warning("No rate rows produced")
    # NaN is emitted as-is; consumers treat it as a missing value
    json.dump([row.to_dict() for row in rows], sys.stdout, indent=2)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
