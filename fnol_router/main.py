"""FastAPI application: FNOL upload and processing."""
import logging
from pathlib import Path

from fastapi import FastAPI, File, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import BaseModel

from fnol_router.config import settings
from fnol_router.pipeline import process_document, process_text
from fnol_router.schemas import ClaimsProcessingResponse, ErrorResponse

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="FNOL Claims Router",
    description="Extract FNOL fields, detect missing mandatory data, and route claims to a queue.",
    version="1.0.0",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/", include_in_schema=False)
def root():
    """Redirect root to API docs."""
    return RedirectResponse(url="/docs", status_code=302)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post(
    "/api/v1/process",
    response_model=ClaimsProcessingResponse,
    responses={422: {"model": ErrorResponse}},
)
async def process_fnol(file: UploadFile = File(...)):
    """
    Upload a FNOL document already rendered as text (.txt). Returns extracted
    fields, missing fields, recommended route, and reasoning.
    """
    suffix = (Path(file.filename or "").suffix or "").lower()
    if suffix != ".txt":
        raise HTTPException(
            status_code=400,
            detail="Only TXT files are supported.",
        )
    content = await file.read()
    if not content:
        raise HTTPException(status_code=400, detail="Empty file.")

    result = process_document(content)
    if isinstance(result, ErrorResponse):
        return JSONResponse(status_code=422, content=result.model_dump())
    return result


class TextInput(BaseModel):
    content: str


@app.post("/api/v1/process/text", response_model=ClaimsProcessingResponse)
async def process_fnol_text(body: TextInput):
    """Process FNOL from raw text (JSON body: {\"content\": \"...\"})."""
    if not (body.content and body.content.strip()):
        raise HTTPException(status_code=400, detail="Empty text.")
    return process_text(body.content)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "fnol_router.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
    )
