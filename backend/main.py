from __future__ import annotations

import io
import logging
from dataclasses import asdict
from typing import Any, Dict

from fastapi import FastAPI, File, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from config import API_PREFIX, LOG_FILE_PATH, setup_logging
from services.engine import analyze, format_report
from services.storage import LogStore

setup_logging()
logger = logging.getLogger(__name__)

store = LogStore(LOG_FILE_PATH)

# ──────────────────────────────────────────────────────────────────────────────
# App
# ──────────────────────────────────────────────────────────────────────────────

app = FastAPI(title="Access Log Analyzer (Upload Log → Traffic Summary)")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # dev OK; lock down in prod
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ──────────────────────────────────────────────────────────────────────────────
# Upload endpoint
# ──────────────────────────────────────────────────────────────────────────────

@app.post(f"{API_PREFIX}/upload-log")
async def upload_log_file(file: UploadFile = File(...)) -> Dict[str, Any]:
    """
    Accepts a raw access log, one request per line:
      <timestamp> <METHOD> <PATH> <STATUS> <RESPONSE_TIME_MS>
    Stored as-is (overwrite). Malformed lines are kept; analysis skips them.
    """
    content = await file.read()
    try:
        written = store.save_upload(content)
    except ValueError as e:
        logger.warning("rejected upload %s: %s", file.filename, e)
        raise HTTPException(status_code=400, detail=str(e))

    return {"status": "ok", "written": written, "path": store.stat().path}


# ──────────────────────────────────────────────────────────────────────────────
# Health
# ──────────────────────────────────────────────────────────────────────────────

@app.get(f"{API_PREFIX}/health")
def health() -> Dict[str, Any]:
    return asdict(store.stat())


# ──────────────────────────────────────────────────────────────────────────────
# Summary (JSON) + report (text)
# ──────────────────────────────────────────────────────────────────────────────

@app.get(f"{API_PREFIX}/summary")
def summary() -> Dict[str, Any]:
    report = analyze(store.read_text())
    return {"summary": report.to_dict()}


@app.get(f"{API_PREFIX}/report", response_class=PlainTextResponse)
def report_text() -> str:
    buf = io.StringIO()
    format_report(analyze(store.read_text()), buf)
    return buf.getvalue()
