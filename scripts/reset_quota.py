#!/usr/bin/env python3
"""Reset daily quota for every community.

Intended to run from cron at UTC midnight. Errors are reported to Logfire
and re-raised so the job exits non-zero.
"""

import asyncio
import sys

import logfire

from meriter.application.usecase.quota import (
    ResetAllQuotasRequest,
    ResetAllQuotasUseCase,
)
from meriter.config import Settings
from meriter.util.di.container import create_container
from meriter.util.logging import setup_logging
from meriter.util.observability import configure_logfire


async def reset_all() -> int:
    """Run the reset inside a single request scope."""
    container = create_container()
    try:
        async with container() as request_container:
            use_case = await request_container.get(ResetAllQuotasUseCase)
            response = await use_case.execute(ResetAllQuotasRequest())
        return response.communities_reset
    finally:
        await container.close()


def main() -> int:
    settings = Settings()

    configure_logfire(settings)
    setup_logging(settings)

    try:
        count = asyncio.run(reset_all())
        logfire.info("Daily quota reset finished", communities_reset=count)
        return 0

    except Exception as e:
        logfire.error(
            "Daily quota reset failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
