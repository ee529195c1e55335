"""HTTP client for the prompt catalog backend.

Mirrors the backend's ``/api/v1/prompts`` REST endpoints. Failures are
raised as :class:`PromptAPIError` so the hosting UI decides how to
surface them.
"""

import logging
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from prompt_console.api.schemas import (
    PlaygroundRequest,
    PlaygroundResponse,
    Prompt,
    PromptCreate,
    PromptUpdate,
    PromptVersion,
)
from prompt_console.strategies.catalog.models import ModelInfo
from prompt_console.strategies.catalog.normalizer import normalize_model_catalog

logger = logging.getLogger(__name__)

PROMPTS_PATH = "/api/v1/prompts"

_prompt = TypeAdapter(Prompt)
_prompt_list = TypeAdapter(list[Prompt])
_version_list = TypeAdapter(list[PromptVersion])
_playground_response = TypeAdapter(PlaygroundResponse)


class PromptAPIError(RuntimeError):
    """Raised when a backend call fails.

    Attributes:
        status_code: HTTP status of the failed response, if one was received.
        detail: Error detail reported by the backend or the transport.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        detail: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


def _error_detail(response: httpx.Response) -> str:
    """Pull a readable error detail out of a failed response."""
    try:
        body = response.json()
    except ValueError:
        return response.text[:500]
    if isinstance(body, dict) and body.get("detail"):
        return str(body["detail"])
    return response.text[:500]


class PromptAPIClient:
    """API client for the prompt catalog endpoints.

    Example:
        ```python
        with PromptAPIClient("http://localhost:3000") as client:
            prompts = client.list_prompts(tag="support")
        ```
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        playground_timeout: float = 120.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the API client.

        Args:
            base_url: Base URL of the backend.
            timeout: Timeout in seconds for regular requests.
            playground_timeout: Timeout in seconds for playground requests.
            transport: Optional httpx transport, used to stub the backend.
        """
        self.base_url = base_url.rstrip("/")
        self._playground_timeout = playground_timeout
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "PromptAPIClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _request(
        self,
        method: str,
        path: str,
        failure_message: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """Send a request and raise PromptAPIError on any failure."""
        try:
            response = self._client.request(method, path, **kwargs)
            response.raise_for_status()
            return response
        except httpx.HTTPStatusError as e:
            detail = _error_detail(e.response)
            logger.error(f"{failure_message}: {e.response.status_code} - {detail}")
            raise PromptAPIError(
                failure_message,
                status_code=e.response.status_code,
                detail=detail,
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"{failure_message}: {e}")
            raise PromptAPIError(failure_message, detail=str(e)) from e

    def _json(self, response: httpx.Response, failure_message: str) -> Any:
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"{failure_message}: invalid JSON body")
            raise PromptAPIError(
                failure_message,
                status_code=response.status_code,
                detail="Invalid JSON in response body",
            ) from e

    def _parse(self, adapter: TypeAdapter, data: Any, failure_message: str) -> Any:
        try:
            return adapter.validate_python(data)
        except ValidationError as e:
            logger.error(f"{failure_message}: unexpected response shape: {e}")
            raise PromptAPIError(failure_message, detail=str(e)) from e

    def health_check(self) -> bool:
        """Check if the backend is reachable.

        Returns:
            True if the backend answers /health with 200, False otherwise.
        """
        try:
            response = self._client.get("/health", timeout=5.0)
            return response.status_code == 200
        except httpx.HTTPError:
            return False

    def list_prompts(self, search: str | None = None, tag: str | None = None) -> list[Prompt]:
        """Fetch prompts, optionally filtered server-side.

        Args:
            search: Optional search text.
            tag: Optional tag name.

        Returns:
            List of prompts.

        Raises:
            PromptAPIError: If the request fails.
        """
        message = "Failed to fetch prompts"
        params = {}
        if search:
            params["search"] = search
        if tag:
            params["tag"] = tag
        response = self._request("GET", PROMPTS_PATH, message, params=params)
        return self._parse(_prompt_list, self._json(response, message), message)

    def get_prompt(self, prompt_id: int) -> Prompt:
        message = "Failed to fetch prompt"
        response = self._request("GET", f"{PROMPTS_PATH}/{prompt_id}", message)
        return self._parse(_prompt, self._json(response, message), message)

    def create_prompt(self, data: PromptCreate) -> Prompt:
        message = "Failed to create prompt"
        logger.info(f"Creating prompt: {data.name}")
        response = self._request("POST", PROMPTS_PATH, message, json=data.model_dump())
        return self._parse(_prompt, self._json(response, message), message)

    def update_prompt(self, prompt_id: int, data: PromptUpdate) -> Prompt:
        message = "Failed to update prompt"
        logger.info(f"Updating prompt {prompt_id}: {data.name}")
        response = self._request(
            "PUT", f"{PROMPTS_PATH}/{prompt_id}", message, json=data.model_dump()
        )
        return self._parse(_prompt, self._json(response, message), message)

    def delete_prompt(self, prompt_id: int) -> None:
        logger.info(f"Deleting prompt {prompt_id}")
        self._request("DELETE", f"{PROMPTS_PATH}/{prompt_id}", "Failed to delete prompt")

    def get_prompt_versions(self, prompt_id: int) -> list[PromptVersion]:
        """Fetch the version history of a prompt, oldest first as stored."""
        message = "Failed to fetch prompt versions"
        response = self._request("GET", f"{PROMPTS_PATH}/{prompt_id}/versions", message)
        return self._parse(_version_list, self._json(response, message), message)

    def get_available_models(self) -> dict[str, ModelInfo]:
        """Fetch and normalize the backend's model catalog.

        Returns:
            Mapping of model id to display information.

        Raises:
            PromptAPIError: If the request fails.
        """
        message = "Failed to fetch available models"
        response = self._request("GET", f"{PROMPTS_PATH}/models", message)
        return normalize_model_catalog(self._json(response, message))

    def test_playground(self, request: PlaygroundRequest) -> PlaygroundResponse:
        """Run a prompt against the requested models.

        Args:
            request: Prompt, version, models and variables to test.

        Returns:
            Responses keyed by model id.

        Raises:
            PromptAPIError: If the request fails.
        """
        message = "Failed to test prompt"
        logger.info(f"Testing prompt {request.prompt_id} against {request.models}")
        response = self._request(
            "POST",
            f"{PROMPTS_PATH}/playground",
            message,
            json=request.model_dump(),
            timeout=self._playground_timeout,
        )
        return self._parse(_playground_response, self._json(response, message), message)

    def seed_database(self) -> None:
        logger.info("Seeding prompt catalog")
        self._request("POST", f"{PROMPTS_PATH}/seed", "Failed to seed database")
