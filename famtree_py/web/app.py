from fastapi import FastAPI, Request, HTTPException
from fastapi.responses import JSONResponse, Response
import logging

from ..config import load_config
from ..errors import FamtreeError
from ..pipeline import load_family
from ..printer import FORMATS, render

app = FastAPI(title="famtree-py")

cfg = load_config()
logging.basicConfig(level=getattr(logging, cfg.log_level.upper(), logging.WARNING))

_MEDIA_TYPES = {
    "text": "text/plain",
    "json": "application/json",
    "html": "text/html",
}


@app.exception_handler(FamtreeError)
async def famtree_error_handler(request: Request, exc: FamtreeError):
    logging.info("rejected input: %s", exc)
    return JSONResponse(status_code=422, content=exc.to_dict())


async def _read_lines(request: Request):
    body = await request.body()
    try:
        return body.decode(cfg.encoding).splitlines()
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail=f"Request body is not valid {cfg.encoding} text")


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/report")
async def report(request: Request, format: str = "text"):
    """Build the report for the record text posted as the request body."""
    if format not in FORMATS:
        raise HTTPException(status_code=400, detail=f"Unknown format {format!r}")
    registry = load_family(await _read_lines(request))
    # the renderers already produce the final body text
    return Response(content=render(registry, format), media_type=_MEDIA_TYPES[format])


@app.post("/check")
async def check(request: Request):
    registry = load_family(await _read_lines(request))
    return {"ok": True, "persons": len(registry)}
