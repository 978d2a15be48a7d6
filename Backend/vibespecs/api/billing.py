# vibespecs/api/billing.py
from typing import List

from fastapi import APIRouter

from vibespecs.models import PLANS, BillingPlan

router = APIRouter(prefix="/api/billing", tags=["Billing"])


@router.get("/plans", response_model=List[BillingPlan])
async def list_plans():
    """Static plan catalogue. No checkout."""
    return PLANS
