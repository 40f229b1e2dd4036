"""Chat request parsing, validation and log excerpts."""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from typing_extensions import TypedDict

from .exceptions import UnsupportedModelError
from .models import DEFAULT_MODEL, SUPPORTED_MODELS, is_supported_model

logger = logging.getLogger("cheat-proxy")

EXCERPT_LIMIT = 100


class ChatMessage(TypedDict):
    """A single chat message (OpenAI format)."""
    role: str
    content: str


@dataclass
class ChatRequest:
    """Inbound chat request after defaulting; unknown payload fields are dropped."""

    model: str = DEFAULT_MODEL
    messages: list[ChatMessage] = field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: Any) -> "ChatRequest":
        if not isinstance(payload, Mapping):
            # Arrays, strings and numbers carry no fields; everything defaults
            payload = {}
        return cls(
            model=payload.get("model") or DEFAULT_MODEL,
            messages=payload.get("messages") or [],
        )

    @classmethod
    def from_body(cls, body: bytes) -> "ChatRequest":
        """Decode a raw JSON body; decoding errors propagate unchanged."""
        return cls.from_payload(json.loads(body))

    def validate(self) -> None:
        if not is_supported_model(self.model):
            logger.info(f"Unsupported model requested: {self.model}")
            raise UnsupportedModelError(self.model, SUPPORTED_MODELS)

    def last_message_content(self) -> str:
        if not isinstance(self.messages, list) or not self.messages:
            return ""
        last = self.messages[-1]
        content = last.get("content") if isinstance(last, Mapping) else None
        if not content:
            return ""
        if isinstance(content, str):
            return content
        return json.dumps(content, ensure_ascii=False)

    def upstream_payload(self) -> dict[str, Any]:
        return {"model": self.model, "messages": self.messages, "stream": False}


def truncate_for_log(text: str, limit: int = EXCERPT_LIMIT) -> str:
    """Cut ``text`` to ``limit`` characters, marking the cut with ``...``."""
    if len(text) > limit:
        return text[:limit] + "..."
    return text
