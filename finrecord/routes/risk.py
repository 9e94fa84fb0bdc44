"""Risk assessment endpoints."""

from fastapi import APIRouter, Request

from finrecord.models import RiskAssessment, RiskConfig, RiskRequest
from finrecord.processing.risk import calculate_risk_score

router = APIRouter(prefix="/api")


def _get_risk_config(request: Request) -> RiskConfig:
    """Retrieve the risk weights from application state."""
    return request.app.state.config.risk


@router.post("/risk-assessment", response_model=RiskAssessment)
async def assess_risk(
    payload: RiskRequest,
    request: Request,
) -> RiskAssessment:
    """Score a transaction from its amount and currency."""
    score = calculate_risk_score(payload.transaction_details, _get_risk_config(request))
    return RiskAssessment(risk_score=score)


@router.get("/risk-rules", response_model=RiskConfig)
async def get_risk_rules(request: Request) -> RiskConfig:
    """Return the risk weights currently in effect."""
    return _get_risk_config(request)
