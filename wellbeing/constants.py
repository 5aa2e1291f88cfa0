PROFILES_TABLE = "profiles"
MOOD_LOGS_TABLE = "mood_logs"
GRATITUDE_TABLE = "gratitude_entries"

MOOD_RATINGS = [1, 2, 3, 4, 5]
DEFAULT_MOOD_RATING = 3
MOOD_EMOJIS = {
    1: "😣",
    2: "😕",
    3: "😐",
    4: "🙂",
    5: "😄",
}
MOOD_LABELS = {
    1: "Very low - Feeling really tough",
    2: "Low - Having a challenging time",
    3: "Neutral - Just going through the motions",
    4: "Good - Feeling pretty good",
    5: "Very good - Feeling really positive and happy",
}
MOOD_TAGS = {
    1: ("anxious", "stressed", "sad", "tired", "overwhelmed", "lonely", "frustrated", "burnt_out"),
    2: ("stressed", "tired", "irritable", "overwhelmed", "flat", "sad", "frustrated", "hopeful"),
    3: ("flat", "calm", "reflective", "meh", "hopeful", "focused"),
    4: ("content", "focused", "productive", "grateful", "optimistic", "energized", "proud"),
    5: ("joyful", "grateful", "inspired", "content", "proud", "energized", "optimistic"),
}
MOOD_COLORS = {
    1: "#34495E",
    2: "#5DADE2",
    3: "#F1C40F",
    4: "#F39C12",
    5: "#E67E22",
}

GRATITUDE_MIN_LENGTH = 3
GRATITUDE_MAX_LENGTH = 1000
GRATITUDE_WARN_LENGTH = 900
GRATITUDE_PREVIEW_LENGTH = 100
GRATITUDE_EXAMPLES = [
    "The kindness of a stranger who held the door open",
    "A good conversation with a friend",
    "Having a place to live and food to eat",
    "My partner's support and understanding",
]

DASHBOARD_MOOD_LIMIT = 10
DASHBOARD_GRATITUDE_LIMIT = 5

USERNAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 6

REFERRAL_OPTIONS = ["Instagram", "Facebook", "TikTok", "Friend"]
OBJECTIVE_OPTIONS = ["Be happier", "Think better thoughts", "Be less stressed"]

LANGUAGES = {
    "en": "English",
    "es": "Español",
}
DEFAULT_LANGUAGE = "en"

ROUTE_HOME = "/"
ROUTE_LOGIN = "/login"
ROUTE_FORGOT_PASSWORD = "/forgot-password"
ROUTE_RESET_PASSWORD = "/reset-password"
ROUTE_ONBOARDING = "/onboarding"
ROUTE_DASHBOARD = "/dashboard"
ROUTE_PROFILE = "/profile"
ROUTE_MOOD_RATING = "/mood/rating"
ROUTE_MOOD_TAGS = "/mood/tags"
ROUTE_MOOD_CONFIRM = "/mood/confirm"
ROUTE_MOOD_HISTORY = "/mood/history"
ROUTE_GRATITUDE_TODAY = "/gratitude/today"
ROUTE_GRATITUDE_HISTORY = "/gratitude/history"

PUBLIC_ROUTES = {
    ROUTE_HOME,
    ROUTE_LOGIN,
    ROUTE_FORGOT_PASSWORD,
    ROUTE_RESET_PASSWORD,
}
