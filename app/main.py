import logging

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .core.errors import ClientDisconnected
from .api.routes.chat import router as chat_router
from .api.routes.journal import router as journal_router
from .api.routes.learning import router as learning_router
from .api.routes.misc import router as misc_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="MannMitra Wellness Companion", version=settings.API_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(ClientDisconnected)
async def client_disconnected(request: Request, exc: ClientDisconnected):
    # nobody is listening; 499 only shows up in access logs
    return Response(status_code=499)

app.include_router(misc_router)
app.include_router(chat_router)
app.include_router(journal_router)
app.include_router(learning_router)
