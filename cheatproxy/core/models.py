"""Supported model catalog."""

from typing_extensions import TypedDict

DEFAULT_MODEL = "gpt-4o-mini"

SUPPORTED_MODELS: tuple[str, ...] = (
    "gpt-4o",
    "gpt-4o-mini",
    "gpt-4-turbo",
    "gpt-4",
    "gpt-3.5-turbo",
    "gpt-4.1-nano",
)


class ModelInfo(TypedDict):
    """A model entry as listed by ``GET /models``.

    Attributes:
        id: Model identifier accepted by ``POST /chat``.
        name: Display name; currently identical to ``id``.
    """
    id: str
    name: str


def is_supported_model(model: object) -> bool:
    return isinstance(model, str) and model in SUPPORTED_MODELS


def list_model_info() -> list[ModelInfo]:
    """Return the catalog in declaration order."""
    return [ModelInfo(id=model, name=model) for model in SUPPORTED_MODELS]
