from fastapi import APIRouter
from ...core.config import settings
from ...llm.prompts import Tone

router = APIRouter(tags=["misc"])

@router.get("/health")
def health():
    return {"ok": True}

@router.get("/version")
def version():
    return {"version": settings.API_VERSION, "env": settings.APP_ENV}

@router.get("/config/app")
def app_config():
    # lets the client render the tone picker without hard-coding it
    return {"tones": [t.value for t in Tone], "defaultTone": Tone.GENTLE.value, "maxTurns": settings.CHAT_MAX_TURNS}
