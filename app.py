from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import List, Optional

import dotenv
dotenv.load_dotenv()

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from address_reconcile.config import load_config
from address_reconcile.filters import parse_filter_verb
from address_reconcile.parser import AddressParseError, parse_address
from address_reconcile.pipeline import ReconciliationPipeline

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))

ROOT = Path(__file__).resolve().parent
DATA_DIR = ROOT / "data"

cfg = load_config(os.getenv("ADDRESS_CONFIG") or DATA_DIR / "config.default.json")
pipeline = ReconciliationPipeline(cfg)

app = FastAPI(title="Address Reconciliation Service")


class ParseRequest(BaseModel):
    address: str


class CompareRequest(BaseModel):
    addr1: str
    addr2: str


class ReconcileRequest(BaseModel):
    sources: List[str]
    candidates: List[str]
    filter: Optional[str] = None


@app.get("/health")
def health():
    return {"status": "ok", "workers": cfg.workers}


@app.post("/parse")
def parse(payload: ParseRequest):
    try:
        parsed = parse_address(payload.address)
    except AddressParseError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    return {"label": parsed.label(), "address": parsed.to_dict()}


@app.post("/compare")
def compare_addresses(payload: CompareRequest):
    addr1 = payload.addr1.strip()
    addr2 = payload.addr2.strip()
    if not addr1 or not addr2:
        raise HTTPException(status_code=400, detail="addr1 and addr2 must not be empty")
    try:
        return pipeline.compare_addresses(addr1, addr2)
    except AddressParseError as exc:
        raise HTTPException(status_code=422, detail=str(exc))


@app.post("/reconcile")
def reconcile(payload: ReconcileRequest):
    if payload.filter is not None and parse_filter_verb(payload.filter) is None:
        raise HTTPException(status_code=400, detail=f"unknown filter: {payload.filter}")
    try:
        records = pipeline.reconcile_texts(payload.sources, payload.candidates, payload.filter)
    except AddressParseError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    return {"records": [r.to_dict() for r in records]}


if __name__ == "__main__":
    import uvicorn

    host = os.getenv("APP_HOST", "0.0.0.0")
    port = int(os.getenv("APP_PORT", "8008"))
    uvicorn.run(app, host=host, port=port)
