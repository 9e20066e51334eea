"""OpenAI-compatible chat completions client (OpenRouter by default) acting as the scoring oracle."""
from __future__ import annotations
import logging
from typing import Any, Dict, Optional

import requests

from ielts_writer.core import config
from ielts_writer.integrations.interfaces.scoring_oracle import OracleError, ScoringOracle

logger = logging.getLogger(__name__)


class OpenRouterOracle(ScoringOracle):

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = config.OPENROUTER_API_KEY if api_key is None else api_key.strip()
        self.base_url = (base_url or config.OPENROUTER_API_URL).rstrip("/")
        self.model = model or config.OPENROUTER_MODEL
        self.temperature = config.SCORING_TEMPERATURE if temperature is None else temperature
        self.timeout = timeout or config.SCORING_TIMEOUT_SECONDS
        self._session = session or requests.Session()

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/chat/completions"

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "HTTP-Referer": config.OPENROUTER_REFERER,
            "X-Title": config.OPENROUTER_TITLE,
            "Content-Type": "application/json",
        }

    def _payload(self, instructions: str, essay_text: str) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": instructions},
                {"role": "user", "content": essay_text},
            ],
            "response_format": {"type": "json_object"},
            "temperature": self.temperature,
        }

    def complete(self, instructions: str, essay_text: str) -> str:
        if not self.is_configured:
            raise OracleError("OPENROUTER_API_KEY is not configured")

        logger.info("Requesting essay evaluation from %s (model=%s)", self.endpoint, self.model)
        try:
            response = self._session.post(
                self.endpoint,
                headers=self._headers(),
                json=self._payload(instructions, essay_text),
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as e:
            raise OracleError(f"Oracle returned HTTP {e.response.status_code}: {e.response.text[:500]}") from e
        except requests.RequestException as e:
            raise OracleError(f"Oracle request failed: {e}") from e

        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise OracleError(f"Unexpected oracle response envelope: {response.text[:500]}") from e
        if not isinstance(content, str):
            raise OracleError("Oracle reply carried no text content")
        return content

    def close(self) -> None:
        self._session.close()
