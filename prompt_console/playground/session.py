"""Side-by-side playground session.

Holds the host-side state of one playground view: the selected prompt and
version, the two model panels, and the editable variable set. The session
talks to its host only through return values and an injected ``notify``
callback; it never touches UI globals.
"""

import logging
from collections.abc import Callable
from typing import Literal

from prompt_console.api.client import PromptAPIClient, PromptAPIError
from prompt_console.api.schemas import PlaygroundRequest, Prompt
from prompt_console.strategies.template_engine import ResolvedPrompt, TemplateResolver

logger = logging.getLogger(__name__)

NotifyLevel = Literal["success", "info", "warning", "error"]
Notifier = Callable[[NotifyLevel, str, str], None]


class PlaygroundError(RuntimeError):
    """Raised when the playground is asked to run without a usable setup."""


def log_notifier(level: NotifyLevel, title: str, message: str) -> None:
    """Default notifier that only writes to the log."""
    log_level = logging.ERROR if level == "error" else logging.INFO
    logger.log(log_level, f"{title}: {message}")


class PlaygroundSession:
    """State for comparing one prompt across two models.

    When ``sync_models`` is on, only the left model is called and its
    response is shown in both panels.
    """

    def __init__(
        self,
        resolver: TemplateResolver | None = None,
        left_model: str = "openai/gpt-4",
        right_model: str = "anthropic/claude-3-opus",
        sync_models: bool = True,
        notify: Notifier | None = None,
    ) -> None:
        self._resolver = resolver or TemplateResolver()
        self._notify = notify or log_notifier
        self.left_model = left_model
        self.right_model = right_model
        self.sync_models = sync_models
        self.prompt: Prompt | None = None
        self.version: int | None = None
        self.template = ""
        self.variables: dict[str, str] = {}
        self.responses: dict[str, str] = {}

    @property
    def models(self) -> list[str]:
        """Models to request, left first."""
        if self.sync_models:
            return [self.left_model]
        return [self.left_model, self.right_model]

    def set_template(self, text: str) -> dict[str, str]:
        """Replace the template and reconcile the variable set against it.

        Args:
            text: The new template text.

        Returns:
            The reconciled variable set.
        """
        self.template = text
        self.variables = self._resolver.sync(text, self.variables)
        return self.variables

    def select_prompt(self, prompt: Prompt | None, version: int | None = None) -> dict[str, str]:
        """Select a prompt (and optionally one of its versions).

        Variables whose names persist across the switch keep their values.

        Args:
            prompt: The prompt to test, or None to clear the selection.
            version: Version number, or None for the current version.

        Returns:
            The reconciled variable set.
        """
        self.prompt = prompt
        self.version = version
        self.responses = {}
        if prompt is None:
            return self.set_template("")
        logger.info(f"Playground prompt selected: {prompt.id} (version {version or prompt.version})")
        return self.set_template(prompt.text_for_version(version))

    def select_version(self, version: int | None) -> dict[str, str]:
        return self.select_prompt(self.prompt, version)

    def refresh_prompt(self, prompt: Prompt) -> dict[str, str]:
        """Swap in a newer copy of the selected prompt.

        A different prompt id is a new selection. For the same prompt the
        chosen version is kept while it still exists, variable values are
        reconciled against the refreshed text, and responses are cleared
        only when that text changed.

        Args:
            prompt: The latest copy of the prompt from the backend.

        Returns:
            The reconciled variable set.
        """
        if self.prompt is None or self.prompt.id != prompt.id:
            return self.select_prompt(prompt)
        if prompt == self.prompt:
            return self.variables

        known = {prompt.version, *(v.version for v in prompt.versions)}
        if self.version not in known:
            self.version = None
        self.prompt = prompt

        text = prompt.text_for_version(self.version)
        if text != self.template:
            self.responses = {}
        logger.info(f"Playground prompt refreshed: {prompt.id} (version {self.version or prompt.version})")
        return self.set_template(text)

    def set_variable(self, name: str, value: str) -> bool:
        """Edit one variable value.

        Returns:
            True if the variable exists in the current set, False otherwise.
        """
        if name not in self.variables:
            return False
        self.variables[name] = value
        return True

    def preview(self) -> ResolvedPrompt:
        """Render the current template with the current variables."""
        return self._resolver.resolve(self.template, self.variables)

    def build_request(self) -> PlaygroundRequest:
        """Build the playground request for the current state.

        Returns:
            The request to send to the backend.

        Raises:
            PlaygroundError: If no prompt is selected.
        """
        if self.prompt is None:
            raise PlaygroundError("Please select a prompt")

        version = self.version if self.version is not None else self.prompt.version
        return PlaygroundRequest(
            prompt_id=self.prompt.id,
            version=version,
            models=self.models,
            variables=dict(self.variables) or None,
        )

    def run(self, client: PromptAPIClient) -> dict[str, str]:
        """Send the prompt to the selected models.

        Failures are reported through the notifier and leave both panels
        empty.

        Args:
            client: Backend API client.

        Returns:
            Panel responses as ``{"left": ..., "right": ...}``.
        """
        self.responses = {}
        try:
            request = self.build_request()
            result = client.test_playground(request)
        except (PlaygroundError, PromptAPIError) as e:
            self._notify("error", "Error", str(e))
            self.responses = {"left": "", "right": ""}
            return self.responses

        left = result.responses.get(self.left_model, "")
        if self.sync_models:
            right = left
        else:
            right = result.responses.get(self.right_model, "")

        missing = [model for model in request.models if model not in result.responses]
        if missing:
            logger.warning(f"Playground returned no response for: {missing}")

        self.responses = {"left": left, "right": right}
        return self.responses
