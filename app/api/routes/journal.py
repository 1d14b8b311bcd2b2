from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse

from ..deps import run_until_disconnect
from ..schemas import JournalRequest, JournalResponse, JournalErrorResponse
from ...journal.analysis import analyze_entry

router = APIRouter(tags=["journal"])

@router.post("/journal-analysis", response_model=JournalResponse, responses={500: {"model": JournalErrorResponse}})
async def journal_analysis(payload: JournalRequest, request: Request):
    content = payload.content.strip()
    if not content:
        raise HTTPException(status_code=422, detail="content required")

    outcome = await run_until_disconnect(request, analyze_entry(content))
    result = outcome.analysis

    if outcome.error:
        body = JournalErrorResponse(error=outcome.error, analysis=result.analysis_text, suggestion=result.suggestion_text)
        return JSONResponse(status_code=500, content=body.model_dump())
    return JournalResponse(analysis=result.analysis_text, suggestion=result.suggestion_text, entryId=payload.entryId)
