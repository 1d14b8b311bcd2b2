from typing import List
from fastapi import APIRouter

from ..schemas import MythFactOut
from ...content.loader import load_myth_facts, catalog_number

router = APIRouter(prefix="/learning", tags=["learning"])

@router.get("/myth-facts", response_model=List[MythFactOut])
def myth_facts():
    return [
        MythFactOut(number=catalog_number(i), myth=item.myth, fact=item.fact)
        for i, item in enumerate(load_myth_facts())
    ]
