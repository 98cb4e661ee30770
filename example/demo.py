"""
Run a simple search against AllNewsAPI.

    ALLNEWSAPI_API_KEY=... ALLNEWSAPI_BASE_URL=http://localhost:8080 python example/demo.py
"""

import asyncio

import structlog

from allnewsapi import NewsAPI, NewsAPIError, configure_logging, get_settings

logger = structlog.get_logger(__name__)


async def main() -> None:
    settings = get_settings()
    configure_logging(settings)

    news_api = NewsAPI.from_settings(settings)

    try:
        results = await news_api.search(q="google")
        print(results)
    except NewsAPIError as e:
        logger.error("demo_search_failed", status_code=e.status_code, error=e.message)


if __name__ == "__main__":
    asyncio.run(main())
