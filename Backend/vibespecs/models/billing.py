from typing import List

from pydantic import BaseModel

from .identity import Plan


class BillingPlan(BaseModel):
    id: Plan
    name: str
    price: int  # USD per month
    features: List[str]


PLANS: List[BillingPlan] = [
    BillingPlan(
        id="free",
        name="Free",
        price=0,
        features=["3 Projects", "Basic Templates", "Community Support"],
    ),
    BillingPlan(
        id="pro",
        name="Pro",
        price=19,
        features=["Unlimited Projects", "Premium Templates", "Priority Support", "AI Generation"],
    ),
    BillingPlan(
        id="team",
        name="Team",
        price=49,
        features=["Everything in Pro", "Team Collaboration", "Admin Dashboard"],
    ),
]
