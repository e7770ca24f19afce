from fastapi import APIRouter
from shop.backend import common
from shop.session import HeaderView, header_view

router = APIRouter(prefix="/session", tags=["session"])


@router.get("/header", response_model=HeaderView)
def get_header(dark: bool = False):
    return header_view(common.session, is_dark_mode=dark)


@router.post("/logout")
def logout():
    common.session.sign_out()
    return {"success": True}
