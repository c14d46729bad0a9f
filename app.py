import json
import logging

import streamlit as st

import config
from agent import ConfigurationError
from places import get_nearby_restaurants
from prompts import build_mood_prompt, get_selected_meal
from recommender import RecommendationError, chat

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


# Page configuration
st.set_page_config(
    page_title="Mood Food",
    page_icon="🍽️",
    layout="centered"
)

# Initialize session state
if "messages" not in st.session_state:
    st.session_state.messages = []
if "recommendations" not in st.session_state:
    st.session_state.recommendations = None
if "mood" not in st.session_state:
    st.session_state.mood = None

# App header
st.title("🍽️ Mood Food")
st.markdown("**Let's find the perfect meal to match your mood!**")
st.markdown("---")

# Mood selection grid
columns = st.columns(4)
for index, mood in enumerate(config.MOODS):
    with columns[index % 4]:
        if st.button(f"{mood['emoji']} {mood['label']}", use_container_width=True):
            st.session_state.mood = mood["label"]

if st.session_state.mood:
    st.caption(f"Selected mood: {st.session_state.mood}")

with st.sidebar:
    st.subheader("Your location")
    tz_name = st.text_input("Time zone", value=config.DEFAULT_TZ_NAME)
    latitude = st.number_input("Latitude", value=0.0, format="%.6f")
    longitude = st.number_input("Longitude", value=0.0, format="%.6f")
    if st.button("Start over"):
        st.session_state.messages = []
        st.session_state.recommendations = None

context = st.text_area(
    "Tell us more about your mood",
    placeholder="e.g. 'I just finished a workout' or 'I had a stressful day'",
)

if st.button("Get recommendations", type="primary"):
    if not st.session_state.mood:
        st.error("Please select a mood before submitting.")
    else:
        meal = get_selected_meal(tz_name)
        user_turn = {"role": "user", "content": build_mood_prompt(st.session_state.mood, context, meal)}
        with st.spinner("Thinking..."):
            try:
                result = chat(st.session_state.messages + [user_turn])
            except ConfigurationError as e:
                logger.error("Configuration error: %s", e)
                st.error("The recommendation service is not configured.")
            except RecommendationError as e:
                logger.error("Recommendation failed at %s: %s", e.timestamp, e.message)
                st.error("Failed to get recommendations.")
            else:
                recommendations = result.model_dump(by_alias=True)
                st.session_state.messages.append(user_turn)
                st.session_state.messages.append(
                    {"role": "assistant", "content": json.dumps(recommendations)}
                )
                st.session_state.recommendations = recommendations
                st.success("Recommendations received!")

# Display recommendations
recommendations = st.session_state.recommendations
if recommendations:
    for index, food in enumerate(recommendations["foods"]):
        names = [food.get(slot) for slot in ("1", "2", "3") if food.get(slot)]
        food_name = next(iter(names), None) or food.get("extra")
        with st.container(border=True):
            st.subheader(" / ".join(names) or food_name or "Suggestion")
            if food.get("extra"):
                st.caption(f"Extra: {food['extra']}")
            st.markdown(food["reason"])

            nutrition = food.get("nutrition") or {}
            if nutrition.get("key_vitamins_minerals"):
                st.caption(f"Key vitamins & minerals: {nutrition['key_vitamins_minerals']}")

            if food_name and st.button(f"Find nearby restaurants for {food_name}", key=f"places-{index}"):
                with st.spinner("Finding nearby restaurants..."):
                    places = get_nearby_restaurants(latitude, longitude, food_name)
                if "error" in places:
                    st.error("Failed to load restaurants.")
                elif not places["data"]:
                    st.info("No restaurants found.")
                else:
                    for restaurant in places["data"]:
                        st.markdown(f"**{restaurant['name']}** ⭐ {restaurant['rating'] or 'N/A'}")
                        if restaurant["address"]:
                            st.caption(restaurant["address"])
                        if restaurant["is_open"] is not None:
                            st.caption("Open now" if restaurant["is_open"] else "Closed")
                        if restaurant["photoUrl"]:
                            st.image(restaurant["photoUrl"], width=300)
                        st.markdown(f"[Directions]({restaurant['directionsUrl']})")
