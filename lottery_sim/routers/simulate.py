import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from lottery_sim.domain.digit_sampler import generate_number
from lottery_sim.domain.errors import DistributionError
from lottery_sim.domain.weight_table import WeightTable
from lottery_sim.models.dc_models import LotteryResponse, PrizeKindModel

simulate_router = APIRouter(prefix="/simulate")


def get_weight_table(request: Request) -> WeightTable:
    """Return the weight table loaded when the server started"""
    return request.app.state.weight_table


def draw(weight_table: WeightTable, prize_kind: PrizeKindModel) -> LotteryResponse:
    """Draw a number for the given prize kind

    Args:
        weight_table (WeightTable): Digit weights loaded at startup
        prize_kind (PrizeKindModel): Decides how many digits are drawn

    Raises:
        HTTPException: The weight table cannot be sampled

    Returns:
        LotteryResponse: The drawn number
    """
    try:
        number = generate_number(weight_table, prize_kind.digit_count)
    except DistributionError as e:
        logging.error(f"Error in drawing {prize_kind.value}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Digit weights cannot be sampled.",
        )
    return LotteryResponse(number=number)


class SimulateAPI:
    @staticmethod
    @simulate_router.get("/first_prize", response_model=LotteryResponse)
    async def simulate_first_prize(
        weight_table: WeightTable = Depends(get_weight_table),
    ):
        return draw(weight_table, PrizeKindModel.first_prize)

    @staticmethod
    @simulate_router.get("/last2", response_model=LotteryResponse)
    async def simulate_last2(weight_table: WeightTable = Depends(get_weight_table)):
        return draw(weight_table, PrizeKindModel.last2)

    @staticmethod
    @simulate_router.get("/front3", response_model=LotteryResponse)
    async def simulate_front3(weight_table: WeightTable = Depends(get_weight_table)):
        return draw(weight_table, PrizeKindModel.front3)

    @staticmethod
    @simulate_router.get("/last3", response_model=LotteryResponse)
    async def simulate_last3(weight_table: WeightTable = Depends(get_weight_table)):
        return draw(weight_table, PrizeKindModel.last3)
