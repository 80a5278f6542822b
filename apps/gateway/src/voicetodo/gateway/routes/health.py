"""健康检查路由

GET /health: Liveness 检查，永远返回 200。
GET /ready: Readiness 检查，验证 Store 已初始化且预置账号存在。
"""

import structlog
from fastapi import APIRouter, Request
from starlette.responses import JSONResponse

log = structlog.get_logger()

router = APIRouter()


@router.get("/health")
async def health():
    """Liveness 检查 -- 永远返回 200"""
    return {"status": "ok"}


@router.get("/ready")
async def ready(request: Request):
    """Readiness 检查

    检查项：
    1. store: Store 实例组已在 lifespan 中创建
    2. users: 至少存在一个可登录账号
    """
    checks = {}
    all_ok = True

    store_group = getattr(request.app.state, "store_group", None)
    if store_group is not None:
        checks["store"] = "ok"
        user_count = store_group.user_store.count()
        checks["users"] = user_count
        if user_count == 0:
            all_ok = False
    else:
        checks["store"] = "unavailable"
        checks["users"] = 0
        all_ok = False

    if not all_ok:
        log.warning("readiness_check_failed", checks=checks)

    return JSONResponse(
        status_code=200 if all_ok else 503,
        content={
            "status": "ready" if all_ok else "not_ready",
            "checks": checks,
        },
    )
