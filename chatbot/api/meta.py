# Role: Page metadata for clients (title/description), the same values the Streamlit page uses.

from fastapi import APIRouter
from pydantic import BaseModel

import chatbot.config as config

router = APIRouter(tags=["meta"])


class PageMeta(BaseModel):
    title: str
    description: str


@router.get("/meta", response_model=PageMeta)
def get_meta() -> PageMeta:
    return PageMeta(title=config.PAGE_TITLE, description=config.PAGE_DESCRIPTION)
