from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse

from ..deps import run_until_disconnect
from ..schemas import ChatRequest, ChatResponse, ChatErrorResponse
from ...conversation.orchestrator import handle_chat
from ...conversation.turns import Speaker, Turn
from ...llm.prompts import Tone

router = APIRouter(tags=["chat"])

@router.post("/chat-companion", response_model=ChatResponse, responses={500: {"model": ChatErrorResponse}})
async def chat_companion(payload: ChatRequest, request: Request):
    text = payload.message.strip()
    if not text:
        raise HTTPException(status_code=422, detail="message required")

    history = [
        Turn(text=m.content, speaker=Speaker.USER if m.isUser else Speaker.ASSISTANT)
        for m in payload.conversationHistory
    ]
    outcome = await run_until_disconnect(request, handle_chat(text, history, Tone.from_value(payload.tone)))

    if outcome.error:
        body = ChatErrorResponse(error=outcome.error, response=outcome.reply, isHighRisk=outcome.is_high_risk)
        return JSONResponse(status_code=500, content=body.model_dump())
    return ChatResponse(response=outcome.reply, isHighRisk=outcome.is_high_risk)
