from fastapi import APIRouter, Request


router = APIRouter(tags=["health"])


@router.get("/test")
def test(request: Request):
    return {
        "status": "ok",
        "message": "Photo server is running",
        "storage": "ready" if request.app.state.storage is not None else "unavailable",
    }
