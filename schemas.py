from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class ChatTurn(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str


class FoodRecommendation(BaseModel):
    """One suggestion from the model: up to three ranked dishes, an optional extra and a reason."""

    model_config = ConfigDict(populate_by_name=True)

    first: Optional[str] = Field(default=None, alias="1")
    second: Optional[str] = Field(default=None, alias="2")
    third: Optional[str] = Field(default=None, alias="3")
    extra: Optional[str] = None
    reason: str = Field(min_length=1)

    @property
    def food_name(self) -> Optional[str]:
        # Only one dish per suggestion is carried into nutrition analysis
        return self.first or self.second or self.third or self.extra or None


class FoodRecommendations(BaseModel):
    foods: List[FoodRecommendation]


class EnrichedFoodRecommendation(FoodRecommendation):
    nutrition: Dict[str, Any] = Field(default_factory=dict)


class EnrichedFoodRecommendations(BaseModel):
    foods: List[EnrichedFoodRecommendation]
