from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from src.config import get_settings
from src.models.chat import ChatRequest, ChatResponse, ErrorResponse
from src.services.conversation_service import build_provider_history
from src.services.gemini_service import GeminiServices, get_gemini_service
from src.utils.response import create_error_response
import logging

router = APIRouter()

@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={500: {"model": ErrorResponse}}
)
async def chat(
    request: ChatRequest,
    gemini: GeminiServices = Depends(get_gemini_service)
):
    """
    Relay one user turn to the model with the rebuilt conversation
    """
    try:
        settings = get_settings()
        history = build_provider_history(request, settings.max_history_turns)

        logging.info(
            f"Chat turn: mode={request.mode.value}, "
            f"history={len(request.history)}, message_len={len(request.message)}"
        )

        reply = await gemini.send_chat(history=history, message=request.message)

        return ChatResponse(reply=reply)

    except Exception as e:
        logging.error(f"Chat failed: {str(e)}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content=create_error_response()
        )
