"""
Sentibot console chatbot entry point.
"""

import asyncio
import sys

from loguru import logger

from sentibot.config import settings
from sentibot.integrations.analytics import AnalyticsDispatcher
from sentibot.services.chat_engine import InteractionLoop
from sentibot.services.knowledge_service import KnowledgeBaseError, load_knowledge_base


def configure_logging() -> None:
    logger.remove()
    logger.add(sys.stderr, level=settings.log_level)


def run() -> int:
    configure_logging()
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")

    try:
        entries = load_knowledge_base(settings.KNOWLEDGE_BASE_PATH or None)
    except KnowledgeBaseError as e:
        logger.error(str(e))
        return 1

    loop = InteractionLoop(entries, AnalyticsDispatcher())
    try:
        asyncio.run(loop.run())
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")

    return 0


# ── Run ──────────────────────────────────────────────────
if __name__ == "__main__":
    sys.exit(run())
