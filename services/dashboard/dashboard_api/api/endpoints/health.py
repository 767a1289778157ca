import time

from fastapi import APIRouter

router = APIRouter(tags=["health"])
_start_time = time.time()


@router.get("/healthz")
async def healthz():
    return {"status": "ok", "uptime_s": time.time() - _start_time}
