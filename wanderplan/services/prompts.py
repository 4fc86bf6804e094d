# wanderplan/services/prompts.py

from wanderplan.schemas.trip import TripPreferences

SYSTEM_INSTRUCTION = """
You are an expert family travel planner. Your goal is to create detailed, realistic,
and structured travel itineraries based on user inputs.
Always prioritize family-friendly logistics (not too many activities, breaks included).
Format dates based on the user's start date.
Ensure the output is strictly valid JSON adhering to the provided schema.
""".strip()


def trip_prompt(prefs: TripPreferences) -> str:
    """
    Create the opening request for a new trip.

    Args:
        prefs: The traveler preferences.

    Returns:
        A formatted prompt string for the AI model.
    """
    interests = ", ".join(prefs.interests) or "None in particular"

    return f"""
    Create a {prefs.duration}-day trip to {prefs.destination} starting on {prefs.start_date.isoformat()}.
    Travelers: {prefs.travelers}.
    Budget: {prefs.budget}.
    Walking Tolerance: {prefs.walking}.
    Interests: {interests}.

    Number the days from 1 to {prefs.duration} in the "dayNumber" field.
    Please provide a day-by-day itinerary.
    """


def refine_prompt(feedback: str) -> str:
    """Create a follow-up request that revises the itinerary already in the chat."""
    return f"""
    Update the itinerary based on this feedback: "{feedback}".
    Keep the same JSON structure. Maintain the same dates, the same number of days
    and the general flow unless requested otherwise.
    """
