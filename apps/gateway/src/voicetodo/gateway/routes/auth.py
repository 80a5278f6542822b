"""认证路由

POST /api/auth/login: 校验凭据，创建会话并写入 sessionId cookie。
POST /api/auth/logout: 删除会话并清除 cookie。
GET /api/auth/me: 返回当前登录用户。
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from starlette.responses import JSONResponse
from voicetodo.core.exceptions import InvalidCredentialsError

from ..config import SESSION_COOKIE_NAME, GatewayConfig
from ..deps import get_auth_service, get_config, get_session_id
from ..errors import error_response
from ..services.auth_service import AuthService

router = APIRouter()


class LoginRequest(BaseModel):
    """登录请求体"""

    username: str = Field(min_length=1, description="用户名")
    password: str = Field(min_length=1, description="密码")


class UserInfo(BaseModel):
    """对外用户信息（不含密码）"""

    id: str
    username: str


class UserResponse(BaseModel):
    """当前用户响应"""

    user: UserInfo


@router.post("/api/auth/login", response_model=UserResponse)
async def login(
    body: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
    config: GatewayConfig = Depends(get_config),
):
    """登录

    - 凭据正确返回 200 并设置 httpOnly cookie
    - 凭据错误返回 401，不设置 cookie
    """
    try:
        user, session = await auth_service.login(body.username, body.password)
    except InvalidCredentialsError as e:
        return error_response(401, e.message)

    response = JSONResponse(
        status_code=200,
        content=UserResponse(user=UserInfo(**user.public_view())).model_dump(),
    )
    response.set_cookie(
        SESSION_COOKIE_NAME,
        session.session_id,
        max_age=config.cookie_max_age,
        httponly=True,
        secure=config.secure_cookies,
        samesite="lax",
    )
    return response


@router.post("/api/auth/logout")
async def logout(
    session_id: str | None = Depends(get_session_id),
    auth_service: AuthService = Depends(get_auth_service),
    config: GatewayConfig = Depends(get_config),
):
    """登出 -- 无论会话是否存在都返回 200"""
    await auth_service.logout(session_id)

    response = JSONResponse(
        status_code=200,
        content={"message": "Logged out successfully"},
    )
    response.delete_cookie(
        SESSION_COOKIE_NAME,
        httponly=True,
        secure=config.secure_cookies,
        samesite="lax",
    )
    return response


@router.get("/api/auth/me", response_model=UserResponse)
async def me(
    session_id: str | None = Depends(get_session_id),
    auth_service: AuthService = Depends(get_auth_service),
):
    """返回当前用户；未登录/会话过期/用户不存在均为 401"""
    user = await auth_service.current_user(session_id)
    return UserResponse(user=UserInfo(**user.public_view()))
