"""HTTP client for the essay API, used by the terminal editor."""
from __future__ import annotations
from typing import Any, Dict, List, Optional

import requests

from ielts_writer.core.config import API_BASE_URL


class ApiError(Exception):
    def __init__(self, status_code: Optional[int], message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class EssayApiClient:

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        *,
        timeout: float = 90,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            res = self._session.request(method, f"{self.base_url}{path}", timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise ApiError(None, f"Could not reach the essay server: {e}") from e
        if not res.ok:
            try:
                message = res.json().get("detail") or res.reason
            except ValueError:
                message = res.text or res.reason
            raise ApiError(res.status_code, str(message))
        return res.json()

    # ------------------------------------------------------------------
    # Prompts
    # ------------------------------------------------------------------
    def list_prompts(self, category: Optional[str] = None) -> List[Dict[str, Any]]:
        params = {"category": category} if category else None
        return self._request("GET", "/api/prompts", params=params)

    def get_prompt(self, prompt_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/api/prompts/{prompt_id}")

    # ------------------------------------------------------------------
    # Essays
    # ------------------------------------------------------------------
    def list_essays(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/essays")

    def create_essay(self, essay: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/api/essays", json=essay)

    def update_essay(self, essay_id: int, changes: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PATCH", f"/api/essays/{essay_id}", json=changes)

    def delete_essay(self, essay_id: int) -> Dict[str, Any]:
        return self._request("DELETE", f"/api/essays/{essay_id}")

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------
    def validate_essay(self, content: str, prompt: str) -> Dict[str, Any]:
        return self._request("POST", "/api/validate-essay", json={"content": content, "prompt": prompt})

    def close(self) -> None:
        self._session.close()
