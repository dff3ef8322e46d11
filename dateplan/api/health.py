"""헬스/준비성 체크 API."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from dateplan.core.readiness import collect_readiness_status

router = APIRouter(tags=["health"])


@router.get("/")
def health_check() -> dict:
    """프로세스가 요청을 받을 수 있는지만 확인한다."""
    return {"status": "ok", "message": "Dateplan Server is running"}


@router.get("/ready")
async def readiness_check() -> JSONResponse:
    """스폿 DB까지 준비되었는지 확인한다. 준비되지 않았으면 503."""
    result = await collect_readiness_status()
    status_code = 200 if result["status"] == "ready" else 503
    return JSONResponse(status_code=status_code, content=result)
