"""
Mood based food recommendations enriched with nutrition facts.

A request runs through a small LangGraph pipeline:

    recommend -> analyze_nutrition -> enrich

The recommendation step must produce valid JSON matching FoodRecommendations;
any failure there is raised to the caller as RecommendationError. The
nutrition step never fails: when the model call or its JSON cannot be used,
values come from the built-in fallback table instead.
"""
import json
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional, TypedDict

import pytz
from langchain_core.messages import HumanMessage, SystemMessage
from langgraph.graph import END, START, StateGraph
from pydantic import ValidationError

import config
from agent import build_llm, convert_to_langchain_messages, invoke_model
from nutrition_data import find_nutrition_from_fallback
from response_processing import parse_model_json
from schemas import EnrichedFoodRecommendation, EnrichedFoodRecommendations, FoodRecommendations

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/A"


class RecommendationError(Exception):
    """The model could not produce usable recommendations."""

    def __init__(self, message: str, timestamp: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.timestamp = timestamp or datetime.now(pytz.utc).isoformat()

    def to_dict(self) -> Dict[str, Any]:
        return {"error": True, "message": self.message, "timestamp": self.timestamp}


@dataclass(frozen=True)
class NutritionResult:
    """
    Outcome of a nutrition lookup.

    source is "model" when the live answer was used and "fallback" when the
    values came from the built-in table; error says why the model was skipped.
    """

    data: Dict[str, Any]
    source: str
    error: Optional[str] = None

    @property
    def degraded(self) -> bool:
        return self.source == "fallback"


# ------------------------------------------------------------------ #
# Nutrition
# ------------------------------------------------------------------ #

def _fallback_nutrition(food_items: List[str], error: str) -> NutritionResult:
    result = {}
    for food_item in food_items:
        fallback = find_nutrition_from_fallback(food_item)
        if fallback is not None:
            result[food_item] = dict(fallback)
    logger.warning("Using fallback nutrition data for %d of %d items", len(result), len(food_items))
    return NutritionResult(data=result, source="fallback", error=error)


def resolve_nutrition(food_items, llm=None) -> NutritionResult:
    """
    Get nutrition facts for each dish, keyed by the dish names as given.

    Only a missing API key raises. Model errors and unusable replies fall
    back to the built-in table; dishes it does not know are left out.
    """
    if llm is None:
        llm = build_llm(config.NUTRITION_TEMPERATURE, config.NUTRITION_MAX_TOKENS)

    food_items = list(food_items)
    if not food_items:
        return NutritionResult(data={}, source="model")

    prompt = config.NUTRITION_PROMPT_TEMPLATE.format(food_items=", ".join(food_items))
    try:
        raw = invoke_model(llm, [
            SystemMessage(content=config.NUTRITION_SYSTEM_PROMPT),
            HumanMessage(content=prompt),
        ])
    except Exception as exc:
        logger.error("Nutrition analysis error: %s", exc)
        return _fallback_nutrition(food_items, str(exc) or exc.__class__.__name__)

    logger.debug("Raw nutrition response: %s", raw)
    try:
        parsed = parse_model_json(raw)
    except json.JSONDecodeError as exc:
        logger.error("Failed to parse nutrition JSON: %s", exc)
        return _fallback_nutrition(food_items, f"Invalid nutrition JSON: {exc}")

    if not isinstance(parsed, dict):
        logger.error("Nutrition response is not a JSON object: %r", parsed)
        return _fallback_nutrition(food_items, "Nutrition response is not a JSON object")

    # Passed through as is; the model often adds or omits optional fields
    return NutritionResult(data=parsed, source="model")


def analyze_nutrition(food_items, llm=None) -> Dict[str, Any]:
    return resolve_nutrition(food_items, llm=llm).data


# ------------------------------------------------------------------ #
# Merging
# ------------------------------------------------------------------ #

def _display_value(nutrition, key):
    value = nutrition.get(key)
    if value is None or value == "":
        return NOT_AVAILABLE
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def nutrition_summary(nutrition) -> str:
    calories = _display_value(nutrition, "calories")
    protein = _display_value(nutrition, "protein_g")
    carbs = _display_value(nutrition, "carbohydrates_g")
    health_benefits = nutrition.get("health_benefits") or ""
    return (
        f"Nutritional Benefits: This dish contains {calories} calories, "
        f"{protein}g protein, and {carbs}g carbohydrates. {health_benefits}"
    )


def enrich_recommendations(recommendations: FoodRecommendations, nutrition_data) -> EnrichedFoodRecommendations:
    foods = []
    for food in recommendations.foods:
        food_name = food.food_name
        nutrition = nutrition_data.get(food_name) if food_name else None
        if not isinstance(nutrition, dict):
            nutrition = {}

        enriched = food.model_dump(by_alias=True)
        enriched["nutrition"] = dict(nutrition)
        enriched["reason"] = f"{food.reason}\n\n{nutrition_summary(nutrition)}"
        foods.append(EnrichedFoodRecommendation.model_validate(enriched))
    return EnrichedFoodRecommendations(foods=foods)


# ------------------------------------------------------------------ #
# Pipeline
# ------------------------------------------------------------------ #

class RecommendationState(TypedDict, total=False):
    messages: List[Any]
    recommendations: FoodRecommendations
    food_items: List[str]
    nutrition: NutritionResult
    result: EnrichedFoodRecommendations


def build_recommendation_graph(llm, nutrition_llm):
    def recommend(state: RecommendationState):
        lc_messages = convert_to_langchain_messages(state["messages"])
        lc_messages.insert(0, SystemMessage(content=config.RECOMMENDATION_SYSTEM_PROMPT))

        raw = invoke_model(llm, lc_messages)
        logger.debug("Raw recommendation response: %s", raw)

        try:
            recommendations = FoodRecommendations.model_validate(parse_model_json(raw))
        except json.JSONDecodeError as exc:
            raise ValueError("Failed to parse AI response as JSON") from exc
        except ValidationError as exc:
            raise ValueError(f"AI response did not match the recommendation schema: {exc}") from exc

        food_items = [food.food_name for food in recommendations.foods if food.food_name]
        logger.info("Extracted food items: %s", food_items)
        return {"recommendations": recommendations, "food_items": food_items}

    def nutrition(state: RecommendationState):
        return {"nutrition": resolve_nutrition(state["food_items"], llm=nutrition_llm)}

    def enrich(state: RecommendationState):
        return {"result": enrich_recommendations(state["recommendations"], state["nutrition"].data)}

    builder = StateGraph(RecommendationState)
    builder.add_node("recommend", recommend)
    builder.add_node("analyze_nutrition", nutrition)
    builder.add_node("enrich", enrich)

    builder.add_edge(START, "recommend")
    builder.add_edge("recommend", "analyze_nutrition")
    builder.add_edge("analyze_nutrition", "enrich")
    builder.add_edge("enrich", END)

    return builder.compile()


def chat(messages, llm=None, nutrition_llm=None) -> EnrichedFoodRecommendations:
    """
    Recommend dishes for a conversation and attach nutrition facts to each.

    messages are the prior turns plus the new user turn, oldest first.
    Raises ConfigurationError when the API key is missing and
    RecommendationError for anything else that goes wrong.
    """
    if llm is None:
        llm = build_llm(config.RECOMMENDATION_TEMPERATURE, config.RECOMMENDATION_MAX_TOKENS)
    if nutrition_llm is None:
        nutrition_llm = build_llm(config.NUTRITION_TEMPERATURE, config.NUTRITION_MAX_TOKENS)

    graph = build_recommendation_graph(llm, nutrition_llm)
    try:
        state = graph.invoke({"messages": list(messages)})
    except Exception as exc:
        logger.error("Recommendation error: %s", exc)
        raise RecommendationError(str(exc) or exc.__class__.__name__) from exc

    if state["nutrition"].degraded:
        logger.info("Recommendations enriched from fallback nutrition data")
    return state["result"]
