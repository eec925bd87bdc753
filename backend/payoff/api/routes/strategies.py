from fastapi import APIRouter

from payoff.models.plan import StrategyInfo
from payoff.simulation.strategies import list_strategies

router = APIRouter(tags=["strategies"])


@router.get("/strategies", response_model=list[StrategyInfo])
def get_strategies():
    """Available surplus-allocation strategies, default (avalanche) first."""
    return [
        StrategyInfo(
            name=order.strategy.value,
            key=order.field,
            direction=order.direction,
            description=order.description,
        )
        for order in list_strategies()
    ]
