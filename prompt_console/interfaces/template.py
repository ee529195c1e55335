"""Template resolution interfaces.

Defines the abstract base class for prompt template resolvers and the
policy enums shared by every implementation.
"""

import enum
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence


class PlaceholderPolicy(str, enum.Enum):
    """Which text between ``{{`` and ``}}`` counts as a placeholder name.

    STRICT accepts only ``[A-Za-z0-9_]+`` with no surrounding whitespace.
    LOOSE accepts any brace-free run, trimmed of surrounding whitespace.
    """

    STRICT = "strict"
    LOOSE = "loose"


class MissingValueFallback(str, enum.Enum):
    """How a placeholder without a supplied value is rendered."""

    EMPTY = "empty"
    VERBATIM = "verbatim"


class BaseTemplateResolver(ABC):
    """Abstract base class for template resolution strategies.

    All operations are pure and total: they accept any template string and
    any string mapping and never raise.
    """

    @abstractmethod
    def extract(self, template: str) -> list[str]:
        """Return distinct placeholder names in first-occurrence order.

        Args:
            template: The template text, possibly empty.

        Returns:
            Ordered list of distinct placeholder names.
        """

    @abstractmethod
    def reconcile(
        self,
        names: Sequence[str],
        previous: Mapping[str, str],
    ) -> dict[str, str]:
        """Recompute a variable set for the given names.

        Args:
            names: Distinct placeholder names, in template order.
            previous: The variable set held before the template changed.

        Returns:
            A new mapping with exactly ``names`` as keys.
        """

    @abstractmethod
    def render(self, template: str, values: Mapping[str, str]) -> str:
        """Substitute values into every placeholder of the template.

        Args:
            template: The template text.
            values: Mapping of placeholder name to value.

        Returns:
            The rendered text.
        """

    @property
    @abstractmethod
    def policy(self) -> PlaceholderPolicy:
        """Return the placeholder naming policy in use."""
