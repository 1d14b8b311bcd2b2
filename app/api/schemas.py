from pydantic import BaseModel, Field
from typing import Optional, List

class HistoryItem(BaseModel):
    content: str
    isUser: bool

class ChatRequest(BaseModel):
    message: str
    conversationHistory: List[HistoryItem] = Field(default_factory=list)
    tone: Optional[str] = "gentle"  # gentle|cheerful|formal

class ChatResponse(BaseModel):
    response: str
    isHighRisk: bool

class ChatErrorResponse(BaseModel):
    error: str
    response: str
    isHighRisk: bool

class JournalRequest(BaseModel):
    content: str
    entryId: Optional[str] = None

class JournalResponse(BaseModel):
    analysis: str
    suggestion: str
    entryId: Optional[str] = None

class JournalErrorResponse(BaseModel):
    error: str
    analysis: str
    suggestion: str

class MythFactOut(BaseModel):
    number: int  # 1-based, as cited in journal suggestions
    myth: str
    fact: str
