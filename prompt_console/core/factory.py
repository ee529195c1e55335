"""Component Factory for strategy instantiation.

Builds the template resolver, backend client and playground session
from configuration, so the console picks its placeholder and fallback
policies at runtime without code changes.
"""

import logging

from prompt_console.api.client import PromptAPIClient
from prompt_console.core.config import Settings, get_settings
from prompt_console.interfaces.template import (
    MissingValueFallback,
    PlaceholderPolicy,
)
from prompt_console.playground.session import Notifier, PlaygroundSession
from prompt_console.strategies.template_engine import TemplateResolver

logger = logging.getLogger(__name__)


class ComponentFactory:
    """Factory for creating console components based on configuration.

    Example:
        ```python
        factory = ComponentFactory(get_settings())

        resolver = factory.get_resolver()
        client = factory.get_api_client()
        session = factory.create_playground_session(notify=my_notifier)
        ```
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the factory with optional settings.

        Args:
            settings: Console settings. If None, uses global settings.
        """
        self._settings = settings or get_settings()
        self._resolver_cache: TemplateResolver | None = None
        self._api_client_cache: PromptAPIClient | None = None

    def get_resolver(
        self,
        policy: str | None = None,
        fallback: str | None = None,
    ) -> TemplateResolver:
        """Get a template resolver.

        Args:
            policy: Placeholder policy name. If None, uses settings.
            fallback: Missing-value fallback name. If None, uses settings.

        Returns:
            A configured TemplateResolver.

        Raises:
            ValueError: If a policy or fallback name is unknown.
        """
        if self._resolver_cache is None or policy is not None or fallback is not None:
            policy = policy or self._settings.placeholder_policy
            fallback = fallback or self._settings.missing_value_fallback

            logger.info(f"Instantiating resolver: policy={policy}, fallback={fallback}")

            valid_policies = [p.value for p in PlaceholderPolicy]
            if policy not in valid_policies:
                raise ValueError(
                    f"Unknown placeholder policy: {policy}. Valid options: {valid_policies}"
                )
            valid_fallbacks = [f.value for f in MissingValueFallback]
            if fallback not in valid_fallbacks:
                raise ValueError(
                    f"Unknown missing value fallback: {fallback}. Valid options: {valid_fallbacks}"
                )

            self._resolver_cache = TemplateResolver(policy=policy, fallback=fallback)

        return self._resolver_cache

    def get_api_client(self) -> PromptAPIClient:
        """Get the shared backend API client."""
        if self._api_client_cache is None:
            logger.info(f"Instantiating API client: {self._settings.api_base_url}")
            self._api_client_cache = PromptAPIClient(
                base_url=self._settings.api_base_url,
                timeout=self._settings.request_timeout,
                playground_timeout=self._settings.playground_timeout,
            )
        return self._api_client_cache

    def create_playground_session(self, notify: Notifier | None = None) -> PlaygroundSession:
        """Create a new playground session with the configured defaults."""
        return PlaygroundSession(
            resolver=self.get_resolver(),
            left_model=self._settings.default_left_model,
            right_model=self._settings.default_right_model,
            notify=notify,
        )

    def close(self) -> None:
        """Release cached resources."""
        if self._api_client_cache is not None:
            self._api_client_cache.close()
            self._api_client_cache = None
