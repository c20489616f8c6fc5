from __future__ import annotations
from typing import Any, Dict, List

import httpx
from ..core.config import Settings, settings as default_settings
from ..core.errors import UpstreamError, UpstreamOther, UpstreamQuotaExhausted

QUOTA_ERROR_CODES = {"insufficient_quota"}


def _error_payload(response: httpx.Response) -> Dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {}
    err = body.get("error") if isinstance(body, dict) else None
    return err if isinstance(err, dict) else {}


def classify_http_error(response: httpx.Response) -> UpstreamError:
    err = _error_payload(response)
    message = err.get("message") or f"Inference provider returned HTTP {response.status_code}"
    if err.get("code") in QUOTA_ERROR_CODES or err.get("type") in QUOTA_ERROR_CODES:
        return UpstreamQuotaExhausted(message)
    return UpstreamOther(message)


class OpenAIClient:
    """Handle for an OpenAI-compatible chat completions endpoint.

    Holds configuration only; every call opens its own short-lived httpx
    client, so one instance can be shared by all requests.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        base_url: str = "https://api.openai.com/v1",
        timeout: float = 25,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, cfg: Settings | None = None) -> "OpenAIClient | None":
        cfg = cfg or default_settings
        if not cfg.OPENAI_API_KEY:
            return None
        return cls(
            api_key=cfg.OPENAI_API_KEY,
            model=cfg.OPENAI_MODEL,
            base_url=cfg.OPENAI_BASE_URL,
            timeout=cfg.OPENAI_TIMEOUT_SECONDS,
        )

    async def chat_completion(
        self,
        messages: List[Dict[str, Any]],
        temperature: float = 0.2,
        response_format: dict | None = None,
    ) -> str:
        url = f"{self.base_url.rstrip('/')}/chat/completions"
        headers = {"Authorization": f"Bearer {self.api_key}"}
        payload = {
            "model": self.model,
            "messages": messages,
            "temperature": temperature,
        }
        if response_format:
            payload["response_format"] = response_format
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                r = await client.post(url, headers=headers, json=payload)
                r.raise_for_status()
                data = r.json()
        except httpx.HTTPStatusError as exc:
            raise classify_http_error(exc.response) from exc
        except httpx.HTTPError as exc:
            raise UpstreamOther(str(exc) or exc.__class__.__name__) from exc
        except ValueError as exc:
            raise UpstreamOther("Inference provider returned an unreadable response") from exc

        choices = data.get("choices") if isinstance(data, dict) else None
        if not choices:
            return ""
        first = choices[0] if isinstance(choices, list) else None
        message = first.get("message") if isinstance(first, dict) else None
        content = message.get("content") if isinstance(message, dict) else None
        if content is None and isinstance(message, dict):
            return ""
        if not isinstance(content, str):
            raise UpstreamOther("Inference provider returned an unreadable response")
        return content
