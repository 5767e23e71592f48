from enum import Enum

EARTH_RADIUS_M = 6371e3
COMPASS_DIRECTIONS = [
    "north",
    "northeast",
    "east",
    "southeast",
    "south",
    "southwest",
    "west",
    "northwest",
]
MIN_KEYWORD_LENGTH = 3

STATE_KEYS = [
    "navigator_messages",
    "navigator_turn",
    "highlighted_location",
    "from_location",
    "to_location",
    "persona",
    "show_legend",
]

GREETING_MESSAGE = (
    "Hi! I'm your AI Campus Navigator. Ask me anything like 'Where can I grab a "
    "snack?' or 'Show me a quiet place to study!' and I'll show you the route "
    "from your current location!"
)
FALLBACK_MESSAGE = (
    "Hmm, I'm not sure where that is, but you can explore the map! Try asking "
    "about food, study spots, romantic places, or sports facilities."
)
NO_ROUTE_MESSAGE = "No route found between these locations"

QUICK_QUESTIONS = [
    "Where can I grab a snack?",
    "Show me a quiet place to study",
    "Where can couples hang out?",
    "Find me a place to play sports",
]


class Persona(Enum):
    FACULTY = "faculty"
    NEW_STUDENT = "new-student"
    CAT_LOVER = "cat-lover"
    CAT_FEARFUL = "cat-fearful"


PERSONA_LABELS = {
    Persona.FACULTY.value: "👨‍🏫 Faculty (Fastest Route)",
    Persona.NEW_STUDENT.value: "🎒 New Student (Landmarks)",
    Persona.CAT_LOVER.value: "😻 Cat Lover (Cat Spots)",
    Persona.CAT_FEARFUL.value: "😰 Cat Fearful (Avoid Cats)",
}

PERSONA_COLORS = {
    Persona.FACULTY.value: "#3b82f6",
    Persona.NEW_STUDENT.value: "#f59e0b",
    Persona.CAT_LOVER.value: "#ec4899",
    Persona.CAT_FEARFUL.value: "#10b981",
}

PERSONA_TIPS = {
    Persona.NEW_STUDENT.value: "💡 Tip: Look for landmarks along the way",
    Persona.CAT_LOVER.value: "😻 Keep an eye out for campus cats!",
    Persona.CAT_FEARFUL.value: "😰 Stay on well-lit paths",
}

MARKER_COLORS = {
    "warning": "#ef4444",
    "romantic": "#ec4899",
    "food": "#f59e0b",
    "study": "#3b82f6",
    "sports": "#10b981",
    "medical": "#8b5cf6",
    "hostel": "#f97316",
    "inclusive": "#ec4899",
    "default": "#6366f1",
}


class MapConstants(Enum):
    CENTER = (18.621130576268346, 73.91139588382592)
    MIN_ZOOM = 15
    MAX_ZOOM = 19
    HIGHLIGHT_ZOOM = 18
    HEIGHT_PX = 600
    TILES_ATTRIBUTION = (
        "Tiles &copy; Esri &mdash; Source: Esri, i-cubed, USDA, USGS, AEX, "
        "GeoEye, Getmapping, Aerogrid, IGN, IGP, UPR-EGP, and the GIS User Community"
    )


class Label(Enum):
    FROM_LOCATION = "From"
    TO_LOCATION = "To"
    PERSONA = "Navigation style"
    CHAT_PLACEHOLDER = "Ask me anything about campus..."
    LEGEND_TOGGLE = "Show legend"


class Keys(Enum):
    FROM_LOCATION = "from_location"
    TO_LOCATION = "to_location"
    PERSONA = "persona"
    SHOW_LEGEND = "show_legend"


class Pages(Enum):
    NAVIGATOR = {
        "key": "navigator",
        "title": ":material/smart_toy: AI Navigator",
    }
    CAMPUS_MAP = {
        "key": "map",
        "title": ":material/map: Campus Map",
    }
