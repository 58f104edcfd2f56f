from __future__ import annotations
import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from .contracts import CreateUserRequest, LoginRequest, OnboardStatus, UWFResponse, UserView
from .deps import get_auth_service
from .errors import AuthServiceError
from .service import AuthService

log = logging.getLogger("authservice.routes")

router = APIRouter(prefix="/auth", tags=["auth"])

_STATUS_FOR_TYPE = {
    "VALIDATION": status.HTTP_400_BAD_REQUEST,
    "AUTH_ERROR": status.HTTP_401_UNAUTHORIZED,
    "CONFLICT": status.HTTP_409_CONFLICT,
    "UPSTREAM": status.HTTP_502_BAD_GATEWAY,
    "INTERNAL": status.HTTP_500_INTERNAL_SERVER_ERROR,
}

def _error_response(ex: AuthServiceError) -> JSONResponse:
    body = UWFResponse(ok=False, error=ex.payload)
    return JSONResponse(status_code=_STATUS_FOR_TYPE.get(ex.type, 500), content=body.model_dump())

@router.get("/onboard", response_model=UWFResponse)
def onboard_status(svc: AuthService = Depends(get_auth_service)):
    try:
        count = svc.get_user_count()
        return UWFResponse(ok=True, result=OnboardStatus(onboarding_available=count == 0))
    except AuthServiceError as ex:
        return _error_response(ex)

@router.post("/onboard", response_model=UWFResponse, status_code=status.HTTP_201_CREATED)
def onboard(req: CreateUserRequest, svc: AuthService = Depends(get_auth_service)):
    try:
        svc.create_user(req)
        return UWFResponse(ok=True, result=UserView(username=req.username))
    except AuthServiceError as ex:
        log.info("onboard.failed code=%s", ex.code)
        return _error_response(ex)

@router.post("/login", response_model=UWFResponse)
def login(req: LoginRequest, svc: AuthService = Depends(get_auth_service)):
    try:
        user = svc.login(req.username, req.password)
        return UWFResponse(ok=True, result=UserView(username=user.username))
    except AuthServiceError as ex:
        return _error_response(ex)
