from fastapi import APIRouter
from fastapi.responses import JSONResponse

router = APIRouter(tags=["Health"])  # unauthenticated health; not privileged


@router.get("/health")
async def health_simple() -> JSONResponse:
    """Boring, unbreakable health endpoint; the parser has no dependencies to probe."""
    resp = JSONResponse({"status": "ok"}, status_code=200)
    resp.headers["Cache-Control"] = "no-store"
    return resp
