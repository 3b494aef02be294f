"""
OpenRouter Client

Sends review requests to the OpenRouter chat-completions API and returns
the model's analysis text.
"""

import json
import logging
import requests
from pydantic import ValidationError

from ..errors import OpenRouterAPIError
from ..models.chat import ChatCompletionRequest, ChatCompletionResponse


logger = logging.getLogger(__name__)

INVALID_RESPONSE_MESSAGE = "Invalid response format from OpenRouter API"


class OpenRouterClient:
    """
    OpenRouter API client.

    Uses bearer-token authentication and returns the content of the first
    choice of a chat completion.
    """

    def __init__(self, api_key: str, base_url: str = "https://openrouter.ai/api/v1",
                 timeout: int = 120, referer: str = "https://github.com/marketplace"):
        """
        Initialize OpenRouter client.

        Args:
            api_key: OpenRouter API key
            base_url: API base URL
            timeout: Request timeout in seconds
            referer: Value of the HTTP-Referer attribution header
        """
        if not api_key:
            raise ValueError("OpenRouter API key is required")
        self.api_key = api_key
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({
            'Authorization': f'Bearer {api_key}',
            'HTTP-Referer': referer,
            'Content-Type': 'application/json',
        })

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "OpenRouterClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def complete(self, request: ChatCompletionRequest) -> str:
        """
        Run a chat completion.

        Args:
            request: Validated chat-completions request

        Returns:
            Message content of the first choice

        Raises:
            OpenRouterAPIError: On transport errors, API errors or a response
                without message content
        """
        logger.info(f"Requesting analysis from {request.model}")

        try:
            response = self.session.post(
                f"{self.base_url}/chat/completions",
                json=request.to_payload(),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Request failed: {e}")
            raise OpenRouterAPIError(f"Failed to analyze diff: {e}")

        try:
            data = response.json()
        except ValueError:
            data = None

        if not response.ok:
            if data:
                raise OpenRouterAPIError(
                    f"OpenRouter API error: {json.dumps(data)}",
                    status_code=response.status_code,
                    response_data=data,
                )
            raise OpenRouterAPIError(
                f"Failed to analyze diff: HTTP {response.status_code}",
                status_code=response.status_code,
            )

        # OpenRouter can report upstream provider failures with a 200 status
        if isinstance(data, dict) and 'error' in data and not data.get('choices'):
            raise OpenRouterAPIError(
                f"OpenRouter API error: {json.dumps(data)}",
                status_code=response.status_code,
                response_data=data,
            )

        try:
            parsed = ChatCompletionResponse.model_validate(data)
        except ValidationError as e:
            logger.error(f"Unexpected response body: {e}")
            raise OpenRouterAPIError(INVALID_RESPONSE_MESSAGE, status_code=response.status_code)

        content = parsed.first_content
        if not content:
            raise OpenRouterAPIError(INVALID_RESPONSE_MESSAGE, status_code=response.status_code)

        logger.info(f"Received analysis ({len(content)} characters)")
        return content
