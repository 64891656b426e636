"""Async client for the local Ollama API.

Wraps the Ollama HTTP API (``/api/generate`` and ``/api/tags``) with timeout
handling and structured responses.  Transport failures never raise: every
public method reports them through its return value so callers can degrade
gracefully.

Typical usage::

    client = OllamaClient()
    if await client.is_available():
        resp = await client.generate("Review this stack", model="llama3.1:8b", json_mode=True)
        print(resp.text)
"""

from __future__ import annotations

import httpx
from pydantic import BaseModel, Field


class OllamaResponse(BaseModel):
    """Structured response from an Ollama generation call."""

    text: str = Field(default="", description="Generated text")
    model: str = Field(default="", description="Model that produced the response")
    duration_ms: float = Field(default=0.0, description="Server-side generation time in ms")
    success: bool = Field(default=True, description="Whether the request succeeded")
    error: str | None = Field(default=None, description="Error message on failure")


class OllamaClient:
    """Async client for the Ollama REST API.

    A fresh ``httpx.AsyncClient`` is opened per call, so one instance can be
    shared freely between coroutines.
    """

    def __init__(self, base_url: str = "http://localhost:11434", timeout: int = 60) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _client(self) -> httpx.AsyncClient:
        """Return a fresh ``AsyncClient`` configured with our base URL and timeout."""
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.timeout, connect=5.0),
        )

    @staticmethod
    def _extract_duration_ms(data: dict) -> float:
        """The API reports ``total_duration`` in nanoseconds."""
        return data.get("total_duration", 0) / 1_000_000.0

    def _failure(self, model: str, exc: Exception) -> OllamaResponse:
        """Map a transport exception onto an unsuccessful ``OllamaResponse``."""
        if isinstance(exc, httpx.ConnectError):
            error = f"Cannot connect to Ollama at {self.base_url}. Is the server running?"
        elif isinstance(exc, httpx.TimeoutException):
            error = f"Request to Ollama timed out after {self.timeout}s."
        elif isinstance(exc, httpx.HTTPStatusError):
            error = f"Ollama returned HTTP {exc.response.status_code}: {exc.response.text[:500]}"
        else:
            error = f"Unexpected error during Ollama generate: {exc}"
        return OllamaResponse(model=model, success=False, error=error)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def generate(
        self,
        prompt: str,
        model: str = "llama3.1:8b",
        system: str = "",
        json_mode: bool = False,
        temperature: float | None = None,
    ) -> OllamaResponse:
        """Generate text from a prompt.

        Args:
            prompt: The user prompt.
            model: Ollama model tag to use.
            system: Optional system prompt.
            json_mode: Ask the server to constrain output to valid JSON.
            temperature: Optional sampling temperature override.

        Returns:
            An ``OllamaResponse`` with the generated text or an error.
        """
        payload: dict = {
            "model": model,
            "prompt": prompt,
            "stream": False,
        }
        if system:
            payload["system"] = system
        if json_mode:
            payload["format"] = "json"
        if temperature is not None:
            payload["options"] = {"temperature": temperature}

        try:
            async with self._client() as client:
                response = await client.post("/api/generate", json=payload)
                response.raise_for_status()
                data = response.json()
                return OllamaResponse(
                    text=data.get("response", ""),
                    model=data.get("model", model),
                    duration_ms=self._extract_duration_ms(data),
                    success=True,
                )
        except Exception as exc:  # noqa: BLE001
            return self._failure(model, exc)

    async def is_available(self) -> bool:
        """Return ``True`` if the Ollama server responds to ``/api/tags``."""
        try:
            async with self._client() as client:
                response = await client.get("/api/tags")
                return response.status_code == 200
        except Exception:  # noqa: BLE001
            return False

    async def list_models(self) -> list[str]:
        """Return the sorted names of all locally-available models.

        Returns an empty list if the server is unreachable.
        """
        try:
            async with self._client() as client:
                response = await client.get("/api/tags")
                response.raise_for_status()
                models = response.json().get("models", [])
                return sorted(m.get("name", "") for m in models if m.get("name"))
        except Exception:  # noqa: BLE001
            return []

    async def has_model(self, model: str) -> bool:
        """Check whether a specific model is already pulled locally."""
        return model in await self.list_models()
