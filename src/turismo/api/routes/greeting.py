from fastapi import APIRouter

from .schemas import GreetingResponse

router = APIRouter(tags=["misc"])

GREETING = "API do turismo.rs está no ar!"


@router.get("/", response_model=GreetingResponse)
async def greeting() -> GreetingResponse:
    """Return the fixed greeting."""
    return GreetingResponse(message=GREETING)
