from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(request: Request):
    provider = request.app.state.rate_provider
    return {"status": "ok", "rates": provider.status}
