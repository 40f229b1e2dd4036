"""Chat completion endpoint."""

import logging

from fastapi import Request, Response

from ...config_loader import get_openai_api_key
from ...core import (
    ChatRequest,
    ConfigurationError,
    OpenAIClient,
    UnsupportedModelError,
    UpstreamError,
    truncate_for_log,
)
from ..responses import completion_response, text_response

logger = logging.getLogger("cheat-proxy")


async def chat(request: Request) -> Response:
    """Forward a chat request upstream and reply with the completion text.

    POST /chat

    Error mapping:
        - unsupported model: 400 with the supported-model listing
        - missing OPENAI_API_KEY: 500, no upstream call
        - non-2xx upstream: same status, ``OpenAI API error: <status>``
        - anything else (bad JSON included): 500, ``Error: <message>``
    """
    try:
        chat_request = ChatRequest.from_body(await request.body())
        chat_request.validate()

        user_excerpt = truncate_for_log(chat_request.last_message_content())
        api_key = get_openai_api_key()

        client: OpenAIClient = request.app.state.openai_client
        content = await client.create_completion(chat_request, api_key)

        ai_excerpt = truncate_for_log(content)
        logger.info(f'User: "{user_excerpt}" | AI: "{ai_excerpt}"')
        return completion_response(content)

    except UnsupportedModelError as exc:
        return text_response(exc.message, status_code=400)
    except ConfigurationError as exc:
        return text_response(exc.message, status_code=500)
    except UpstreamError as exc:
        logger.error(f"OpenAI API error ({exc.status_code}): {exc.body}")
        return text_response(exc.message, status_code=exc.status_code)
    except Exception as exc:
        logger.error(f"Chat request error: {exc}")
        return text_response(f"Error: {exc}", status_code=500)
