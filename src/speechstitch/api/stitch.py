import json

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from speechstitch.handler import INVALID_JSON_ERROR, bad_request, handle_payload

router = APIRouter(prefix="/api/v1", tags=["Stitch"])


@router.post("/stitch")
async def stitch(request: Request) -> JSONResponse:
    """Narrate `texts` and upload the stitched audio; same contract as the Lambda handler."""
    raw = await request.body()
    if raw:
        try:
            payload = json.loads(raw)
        except ValueError:
            status_code, body = bad_request(INVALID_JSON_ERROR)
            return JSONResponse(status_code=status_code, content=body)
    else:
        payload = None

    status_code, body = await handle_payload(payload)
    return JSONResponse(status_code=status_code, content=body)
