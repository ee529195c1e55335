"""Prompt catalog seeding script.

Run this script to ask the backend to load its sample prompts.

Usage:
    python -m scripts.seed_catalog
    or
    python scripts/seed_catalog.py (after pip install -e .)
"""

import logging
import sys

from prompt_console.api import PromptAPIError
from prompt_console.core.config import get_settings
from prompt_console.core.factory import ComponentFactory
from prompt_console.core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    """Seed the prompt catalog."""
    settings = get_settings()
    setup_logging(settings)

    factory = ComponentFactory(settings)
    client = factory.get_api_client()
    try:
        if not client.health_check():
            logger.error(f"Backend is not reachable at {settings.api_base_url}")
            return 1
        client.seed_database()
    except PromptAPIError as e:
        logger.error(f"{e}: {e.detail}")
        return 1
    finally:
        factory.close()

    logger.info("Prompt catalog seeded successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
