from pydantic import BaseModel
from enum import Enum


class PrizeKindModel(str, Enum):
    first_prize = "first_prize"  # last 3 digits of the first prize
    last2 = "last2"
    front3 = "front3"
    last3 = "last3"

    @property
    def digit_count(self) -> int:
        if self is PrizeKindModel.last2:
            return 2
        return 3


class LotteryResponse(BaseModel):
    number: str
