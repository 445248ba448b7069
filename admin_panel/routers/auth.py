"""Authentication router: login landing, logout, session identity"""
from fastapi import APIRouter, Request
from fastapi.responses import RedirectResponse
from typing import Optional
import logging

import config
from admin_panel.utils.responses import success

logger = logging.getLogger(__name__)
router = APIRouter(tags=["auth"])


def get_session_phone(request: Request) -> Optional[str]:
    """Phone number of the signed-in user, set after OTP verification"""
    return request.cookies.get(config.SESSION_COOKIE) or None


def get_promoter_id(request: Request) -> Optional[str]:
    """Dependency: promoter document id from the session cookie, or None"""
    return request.cookies.get(config.PROMOTER_COOKIE) or None


@router.get("/login")
async def login_page(request: Request):
    return success(message="Sign in with your phone number")


@router.post("/logout")
async def logout(request: Request):
    logger.info(f"Logout: {get_session_phone(request) or 'anonymous'}")
    response = RedirectResponse("/login", 303)
    response.delete_cookie(config.SESSION_COOKIE, path="/")
    response.delete_cookie(config.PROMOTER_COOKIE, path="/")
    return response
