from fastapi import APIRouter
from polyglot.api import auth
from polyglot.api import translate
from polyglot.api import speech
from polyglot.api import summaries
from polyglot.api import history

router = APIRouter()


@router.get("/health")
async def health():
    return {"status": "ok"}


router.include_router(auth.router)
router.include_router(translate.router)
router.include_router(speech.router)
router.include_router(summaries.router)
router.include_router(history.router)
