import json
import os

import jsonschema
from fastapi import FastAPI, HTTPException, Request

from detid.entrypoint import generate_deterministic_id
from detid.exceptions import DeterministicIdError, MissingFieldError
from detid.generator import uuid5
from detid.keys import coerce_namespace
from detid.logging import get_logger, log_event
from detid.utils.canonicalize import canonicalize, parse_filter

# Allow override via env var for tests or deployments
SCHEMA_DIR = os.environ.get(
    "DETID_SCHEMA_DIR", os.path.join(os.path.dirname(__file__), "schemas")
)
with open(os.path.join(SCHEMA_DIR, "id_request.v1.json"), encoding="utf-8") as fh:
    ID_REQUEST_SCHEMA = json.load(fh)

app = FastAPI(title="detid-api", version="0.1")
logger = get_logger("api")


def _derive(body: dict):
    material = body["material"]
    filter_csv = body.get("filter")
    if isinstance(material, str):
        return generate_deterministic_id(body["namespace"], material, filter_csv)
    # already-parsed object material skips the text parse step
    ns = coerce_namespace(body["namespace"])
    return uuid5(ns, canonicalize(material, parse_filter(filter_csv)))


@app.post("/ids")
async def post_id(request: Request):
    try:
        body = await request.json()
    except ValueError:
        log_event(logger, "id_rejected", {"reason": "body is not JSON"})
        raise HTTPException(status_code=400, detail="request body is not JSON")

    try:
        jsonschema.validate(instance=body, schema=ID_REQUEST_SCHEMA)
    except jsonschema.ValidationError as e:
        log_event(logger, "id_rejected", {"reason": e.message})
        raise HTTPException(status_code=400, detail=str(e))

    try:
        id_ = _derive(body)
    except MissingFieldError as e:
        log_event(logger, "id_rejected", {"reason": str(e), "field": e.field})
        raise HTTPException(status_code=422, detail=str(e))
    except DeterministicIdError as e:
        log_event(logger, "id_rejected", {"reason": str(e)})
        raise HTTPException(status_code=400, detail=str(e))

    ns = coerce_namespace(body["namespace"])
    log_event(logger, "id_generated", {"namespace": str(ns), "id": str(id_)})
    return {"id": str(id_), "namespace": str(ns)}
