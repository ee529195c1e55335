"""Prompt template resolver.

Finds ``{{name}}`` placeholders in prompt text, keeps the editable variable
set in step with the template, and renders the final prompt.
"""

import logging
import re
from collections.abc import Mapping, Sequence

from prompt_console.interfaces.template import (
    BaseTemplateResolver,
    MissingValueFallback,
    PlaceholderPolicy,
)
from prompt_console.strategies.template_engine.models import ResolvedPrompt

logger = logging.getLogger(__name__)


_PATTERNS: dict[PlaceholderPolicy, re.Pattern[str]] = {
    PlaceholderPolicy.STRICT: re.compile(r"\{\{([A-Za-z0-9_]+)\}\}"),
    PlaceholderPolicy.LOOSE: re.compile(r"\{\{([^{}]+?)\}\}"),
}


class TemplateResolver(BaseTemplateResolver):
    """Resolves ``{{name}}`` placeholders in prompt templates.

    Extraction and rendering share one compiled pattern, so any placeholder
    reported by :meth:`extract` is also substituted by :meth:`render`.

    Example:
        ```python
        resolver = TemplateResolver()
        names = resolver.extract("Hello {{name}}")        # ["name"]
        values = resolver.reconcile(names, {"name": "Ada"})
        resolver.render("Hello {{name}}", values)        # "Hello Ada"
        ```
    """

    def __init__(
        self,
        policy: PlaceholderPolicy | str = PlaceholderPolicy.STRICT,
        fallback: MissingValueFallback | str = MissingValueFallback.EMPTY,
    ) -> None:
        """Initialize the resolver.

        Args:
            policy: Placeholder naming policy.
            fallback: Rendering of placeholders that have no value.

        Raises:
            ValueError: If a policy name is unknown.
        """
        self._policy = PlaceholderPolicy(policy)
        self._fallback = MissingValueFallback(fallback)
        self._pattern = _PATTERNS[self._policy]

    @property
    def policy(self) -> PlaceholderPolicy:
        return self._policy

    @property
    def fallback(self) -> MissingValueFallback:
        return self._fallback

    def _name_of(self, match: re.Match[str]) -> str | None:
        """Return the placeholder name for a match, or None if it has none."""
        name = match.group(1).strip()
        return name or None

    def extract(self, template: str) -> list[str]:
        names: list[str] = []
        seen: set[str] = set()
        for match in self._pattern.finditer(template):
            name = self._name_of(match)
            if name is None or name in seen:
                continue
            seen.add(name)
            names.append(name)
        return names

    def reconcile(
        self,
        names: Sequence[str],
        previous: Mapping[str, str],
    ) -> dict[str, str]:
        return {name: previous.get(name, "") for name in names}

    def sync(self, template: str, previous: Mapping[str, str]) -> dict[str, str]:
        """Extract names from the template and reconcile them in one step.

        Args:
            template: The current template text.
            previous: The variable set held before the template changed.

        Returns:
            The recomputed variable set.
        """
        variables = self.reconcile(self.extract(template), previous)
        dropped = [name for name in previous if name not in variables]
        if dropped:
            logger.debug(f"Dropped stale variables: {dropped}")
        return variables

    def render(self, template: str, values: Mapping[str, str]) -> str:
        def substitute(match: re.Match[str]) -> str:
            name = self._name_of(match)
            if name is None:
                return match.group(0)
            if name in values:
                return values[name]
            if self._fallback is MissingValueFallback.VERBATIM:
                return match.group(0)
            return ""

        return self._pattern.sub(substitute, template)

    def resolve(self, template: str, values: Mapping[str, str]) -> ResolvedPrompt:
        """Render the template and report which placeholders lacked a value.

        Args:
            template: The template text.
            values: Mapping of placeholder name to value.

        Returns:
            A ResolvedPrompt with the rendered text and reconciled variables.
        """
        variables = self.reconcile(self.extract(template), values)
        return ResolvedPrompt(
            template=template,
            text=self.render(template, values),
            variables=variables,
            missing=[name for name, value in variables.items() if not value],
        )


_default_resolver = TemplateResolver()


def extract_placeholders(template: str) -> list[str]:
    """Extract placeholder names using the strict policy."""
    return _default_resolver.extract(template)


def reconcile(names: Sequence[str], previous: Mapping[str, str]) -> dict[str, str]:
    """Reconcile a variable set against placeholder names."""
    return _default_resolver.reconcile(names, previous)


def render(template: str, values: Mapping[str, str]) -> str:
    """Render a template with the strict policy and empty-string fallback."""
    return _default_resolver.render(template, values)
