"""
Configuration settings for the Mood Food recommender.
"""
import os

from dotenv import load_dotenv

load_dotenv()


# LLM Selection
LLM_PROVIDER = os.getenv("LLM_PROVIDER", "groq")

# Groq API Configuration
GROQ_API_KEY = os.getenv("GROQ_API_KEY")
GROQ_MODEL_NAME = os.getenv("GROQ_MODEL_NAME", "llama-3.1-8b-instant")

# Gemini API Configuration
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
GEMINI_MODEL_NAME = os.getenv("GEMINI_MODEL_NAME", "gemini-2.0-flash")

# Upper bound on a single model call, in seconds
LLM_TIMEOUT_SECONDS = float(os.getenv("LLM_TIMEOUT_SECONDS", "30"))

# Generation profiles
RECOMMENDATION_TEMPERATURE = 0.7
RECOMMENDATION_MAX_TOKENS = 1000
NUTRITION_TEMPERATURE = 0.2
NUTRITION_MAX_TOKENS = 800

# Google Places Configuration
GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY")
PLACES_SEARCH_URL = "https://places.googleapis.com/v1/places:searchText"
PLACES_MEDIA_URL = "https://places.googleapis.com/v1/{photo_name}/media?maxWidthPx={width}&key={key}"
DIRECTIONS_URL = "https://www.google.com/maps/dir/?api=1&origin={origin_lat},{origin_lng}&destination={dest_lat},{dest_lng}"
PLACES_FIELD_MASK = (
    "places.displayName,places.rating,places.priceLevel,places.photos,"
    "places.formattedAddress,places.location,places.currentOpeningHours"
)
PLACES_RADIUS_METERS = 1000.0
PLACES_MAX_RESULTS = 5
PLACES_TIMEOUT_SECONDS = 5.0
PLACES_PHOTO_MAX_WIDTH = 400

# Used when the user's time zone is unknown
DEFAULT_TZ_NAME = os.getenv("DEFAULT_TZ_NAME", "Asia/Kolkata")

MOODS = [
    {"emoji": "😊", "label": "Happy"},
    {"emoji": "😐", "label": "Bored"},
    {"emoji": "😫", "label": "Stressed"},
    {"emoji": "😢", "label": "Sad"},
    {"emoji": "🥺", "label": "Lonely"},
    {"emoji": "😴", "label": "Tired"},
    {"emoji": "😤", "label": "Frustrated"},
    {"emoji": "🙂", "label": "Normal"},
]

# Prompts
RECOMMENDATION_SYSTEM_PROMPT = (
    "You are a food recommendation expert. Respond with valid JSON only, matching the specified schema. "
    "The JSON must look like {\"foods\": [{\"1\": \"dish\", \"2\": \"dish\", \"3\": \"dish\", "
    "\"extra\": \"dish\", \"reason\": \"text\"}]} where \"reason\" is always present. "
    "Do not include markdown code blocks."
)

NUTRITION_SYSTEM_PROMPT = (
    "You are a nutrition expert. Output ONLY valid JSON, no markdown formatting or code blocks."
)

NUTRITION_PROMPT_TEMPLATE = """Return ONLY a valid JSON object. No markdown, no extra text.
For each of these food items, provide nutritional values: {food_items}

Return as JSON with food names (exactly as provided) as keys. Each value should have:
{{"calories": number, "protein_g": number, "carbohydrates_g": number, "fat_g": number, "fiber_g": number, "key_vitamins_minerals": "string", "health_benefits": "string"}}

Example format:
{{"Chicken Biryani": {{"calories": 450, "protein_g": 28, "carbohydrates_g": 52, "fat_g": 12, "fiber_g": 2, "key_vitamins_minerals": "Iron, Vitamin B", "health_benefits": "..."}}}}

ONLY output valid JSON, nothing else."""

MOOD_PROMPT_TEMPLATE = """I am feeling {mood}.{context}{meal}
Suggest dishes that suit this mood. For every suggestion give up to three ranked dish names, an optional extra dish or drink, and a short reason.

Respond in this JSON shape:
{{"foods": [{{"1": "best dish", "2": "second choice", "3": "third choice", "extra": "optional side or drink", "reason": "why it fits my mood"}}]}}"""
