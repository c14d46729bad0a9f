"""
Built-in nutrition table for common Indian dishes.

Used when the live nutrition model call fails or returns something that
cannot be parsed. The table is frozen at import time.
"""
from types import MappingProxyType

_FALLBACK_NUTRITION = {
    "chana masala": {
        "calories": 350,
        "protein_g": 20,
        "carbohydrates_g": 40,
        "fat_g": 15,
        "fiber_g": 8,
        "key_vitamins_minerals": "Folate, Vitamin K",
        "health_benefits": "Supports heart health, rich in antioxidants",
    },
    "tandoori chicken": {
        "calories": 320,
        "protein_g": 35,
        "carbohydrates_g": 0,
        "fat_g": 18,
        "fiber_g": 0,
        "key_vitamins_minerals": "Vitamin B6, Phosphorus",
        "health_benefits": "Rich in protein, supports bone health",
    },
    "basmati rice with mixed sprouts": {
        "calories": 250,
        "protein_g": 10,
        "carbohydrates_g": 45,
        "fat_g": 4,
        "fiber_g": 6,
        "key_vitamins_minerals": "Folate, Manganese",
        "health_benefits": "Supports digestive health, rich in antioxidants",
    },
    "mango lassi": {
        "calories": 150,
        "protein_g": 5,
        "carbohydrates_g": 30,
        "fat_g": 7,
        "fiber_g": 0,
        "key_vitamins_minerals": "Vitamin A, Calcium",
        "health_benefits": "Supports bone health, rich in probiotics",
    },
    "chicken biryani": {
        "calories": 450,
        "protein_g": 28,
        "carbohydrates_g": 52,
        "fat_g": 12,
        "fiber_g": 2,
        "key_vitamins_minerals": "Iron, Vitamin B, Phosphorus",
        "health_benefits": "Good source of protein and energy, aids digestion with spices",
    },
    "dal makhani": {
        "calories": 320,
        "protein_g": 14,
        "carbohydrates_g": 35,
        "fat_g": 14,
        "fiber_g": 8,
        "key_vitamins_minerals": "Iron, Folate, Magnesium",
        "health_benefits": "High in fiber and plant-based protein, helps regulate blood sugar",
    },
    "rajma chawal": {
        "calories": 380,
        "protein_g": 16,
        "carbohydrates_g": 58,
        "fat_g": 5,
        "fiber_g": 9,
        "key_vitamins_minerals": "Iron, Zinc, Manganese",
        "health_benefits": "Rich in fiber and protein, supports digestive health and satiety",
    },
    "paneer tikka": {
        "calories": 280,
        "protein_g": 22,
        "carbohydrates_g": 8,
        "fat_g": 18,
        "fiber_g": 1,
        "key_vitamins_minerals": "Calcium, Vitamin A, Phosphorus",
        "health_benefits": "Excellent source of calcium and protein, supports bone health",
    },
    "butter chicken": {
        "calories": 420,
        "protein_g": 32,
        "carbohydrates_g": 12,
        "fat_g": 28,
        "fiber_g": 1,
        "key_vitamins_minerals": "Iron, Vitamin B12, Selenium",
        "health_benefits": "Rich in protein and essential amino acids",
    },
    "chole bhature": {
        "calories": 550,
        "protein_g": 18,
        "carbohydrates_g": 72,
        "fat_g": 18,
        "fiber_g": 10,
        "key_vitamins_minerals": "Iron, Manganese, Folate",
        "health_benefits": "Good source of plant protein and fiber",
    },
    "aloo gobi": {
        "calories": 180,
        "protein_g": 6,
        "carbohydrates_g": 28,
        "fat_g": 6,
        "fiber_g": 4,
        "key_vitamins_minerals": "Vitamin C, Potassium, Vitamin K",
        "health_benefits": "Low calorie, rich in antioxidants and fiber",
    },
}

FALLBACK_NUTRITION = MappingProxyType(
    {name: MappingProxyType(record) for name, record in _FALLBACK_NUTRITION.items()}
)


def normalize_food_name(name: str) -> str:
    return name.lower().strip()


def find_nutrition_from_fallback(food_name: str):
    """
    Look up a dish in the fallback table.

    An exact match on the normalized name wins. Otherwise every entry whose
    name contains the query, or is contained in it, is a candidate and the
    longest entry name is returned (earlier entries win ties). Returns None
    when nothing matches.
    """
    normalized = normalize_food_name(food_name or "")
    if not normalized:
        return None

    if normalized in FALLBACK_NUTRITION:
        return FALLBACK_NUTRITION[normalized]

    best_key = None
    for key in FALLBACK_NUTRITION:
        if key in normalized or normalized in key:
            if best_key is None or len(key) > len(best_key):
                best_key = key

    if best_key is None:
        return None
    return FALLBACK_NUTRITION[best_key]
