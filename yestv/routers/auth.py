from typing import Optional

from fastapi import APIRouter, Depends

from ..auth import AuthService
from ..deps import get_auth
from ..schemas import PhoneIn


router = APIRouter(tags=["auth"])


@router.post("/auth/request-otp")
def request_otp(payload: Optional[PhoneIn] = None, auth: AuthService = Depends(get_auth)):
    auth.request_code(payload.phone if payload else None)
    return {"ok": True}


@router.post("/auth/resend-otp")
def resend_otp(payload: Optional[PhoneIn] = None, auth: AuthService = Depends(get_auth)):
    auth.request_code(payload.phone if payload else None, resend=True)
    return {"ok": True}


@router.get("/users")
def lookup_users(phone: Optional[str] = None, otp: Optional[str] = None, auth: AuthService = Depends(get_auth)):
    return auth.lookup(phone, otp)
