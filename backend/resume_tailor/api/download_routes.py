from fastapi import APIRouter, HTTPException
from fastapi.responses import StreamingResponse
from pydantic import BaseModel

from resume_tailor.services.docx_builder import (
    DOCX_FILENAME,
    DOCX_MEDIA_TYPE,
    generate_word_document,
)

router = APIRouter()


class DocxRequest(BaseModel):
    text: str


@router.post("/docx")
async def download_docx(req: DocxRequest):
    """Download the résumé text as a Word document."""
    if not req.text.strip():
        raise HTTPException(status_code=400, detail="Resume text cannot be empty")

    buffer = generate_word_document(req.text)
    return StreamingResponse(
        buffer,
        media_type=DOCX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{DOCX_FILENAME}"'},
    )
