import asyncio
import logging
import sys
from cattree.app import CategoryTreeBenchmark
from cattree.config import setup_logging

async def main() -> int:
    # Setup logging
    setup_logging()
    logger = logging.getLogger(__name__)

    try:
        benchmark = CategoryTreeBenchmark()
        logger.info("Starting category tree comparison...")
        return await benchmark.start()
    except Exception as e:
        logger.error(f"Error running comparison: {e}", exc_info=True)
        return 1

if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
