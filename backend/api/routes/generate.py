"""Plan generation endpoint."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ..config import GENERATE_ROUTE
from ..dependencies import GenerationService
from ..models.requests import BriefRequest
from ..models.responses import ErrorResponse, GeneratedPlanResponse

router = APIRouter()


@router.post(
    GENERATE_ROUTE,
    response_model=GeneratedPlanResponse,
    responses={
        500: {"model": ErrorResponse, "description": "Missing API key or unparseable model output"},
        502: {"model": ErrorResponse, "description": "The model provider call failed"},
    },
    summary="Generate a kids short plan",
    description="Send a creative brief and receive a storyboard, script, metadata and thumbnail ideas.",
)
async def generate_plan(brief: BriefRequest, service: GenerationService):
    """Generate a production plan from a creative brief.

    The provider's JSON is returned verbatim, without re-validation.
    GenerationError is turned into an {"error": ...} body by the app's
    exception handler.
    """
    plan = await service.generate(brief)
    return JSONResponse(content=plan)
