"""
Fixed lookup tables and display limits used by query classification
and village recommendations.

All tables are read-only; iteration order is significant wherever a
table is scanned for the first match.
"""
from types import MappingProxyType
from typing import Mapping, Tuple


# Phrase -> scheme id, scanned in order when no scheme matches directly.
SCHEME_ALIASES: Mapping[str, str] = MappingProxyType({
    "kisan": "pm-kisan",
    "mudra": "pm-mudra",
    "awas": "pmay-gramin",
    "ayushman": "ayushman-bharat",
    "ujjwala": "pm-ujjwala",
    "fasal": "pm-fasal-bima",
    "nrega": "mgnrega",
    "mgnrega": "mgnrega",
    "employment": "mgnrega",
    "health insurance": "ayushman-bharat",
    "housing": "pmay-gramin",
    "forest rights": "forest-rights-act",
    "van dhan": "van-dhan-yojana",
    "jan dhan": "jan-dhan-yojana",
    "jal jeevan": "jal-jeevan-mission",
    "swachh": "swachh-bharat-gramin",
    "eklavya": "eklavya-model-schools",
    "stand up": "stand-up-india",
    "saubhagya": "saubhagya",
    "digital india": "digital-india",
})

# Scheme category -> substrings that signal interest in it.
CATEGORY_KEYWORDS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "agriculture": ("farm", "agriculture", "crop", "farming", "kisan", "farmer", "credit card"),
    "health": ("health", "medical", "hospital", "treatment", "insurance"),
    "employment": ("job", "work", "employment", "income", "business", "loan"),
    "housing": ("house", "home", "housing", "shelter", "construction"),
    "education": ("education", "school", "study", "learning", "student"),
    "forest": ("forest", "tree", "tribal", "jungle", "wood"),
    "energy": ("energy", "gas", "fuel", "cooking", "lpg", "solar"),
    "water": ("water", "jal", "tap", "pipeline"),
    "digital": ("digital", "internet", "online", "computer", "mobile"),
    "pension": ("pension", "old age", "elderly", "retirement"),
    "sanitation": ("toilet", "sanitation", "clean"),
    "infrastructure": ("road", "electricity", "infrastructure", "bridge"),
    "finance": ("bank", "account", "savings", "finance"),
})

# Occupation tag -> scheme ids, in presentation order.
OCCUPATION_SCHEMES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "farmer": ("pm-kisan", "pm-fasal-bima", "kisan-credit-card", "pm-kisan-fpo"),
    "business": ("pm-mudra", "stand-up-india"),
    "worker": ("mgnrega", "pension-scheme"),
    "labour": ("mgnrega", "pension-scheme"),
    "tribal": ("forest-rights-act", "van-dhan-yojana", "eklavya-model-schools"),
    "women": ("pm-ujjwala", "stand-up-india"),
    "artisan": ("pm-mudra", "van-dhan-yojana"),
})

RECOMMENDATION_TRIGGERS: Tuple[str, ...] = (
    "recommend", "suggest", "best", "good", "suitable", "top", "which",
)

# Broadly applicable schemes, shown when nothing more specific matches.
TOP_SCHEME_IDS: Tuple[str, ...] = (
    "pm-kisan", "ayushman-bharat", "mgnrega", "jan-dhan-yojana", "pm-ujjwala",
)

FARMING_OCCUPATIONS: Tuple[str, ...] = ("farming", "agriculture")

# Village profile thresholds
FOREST_DEPENDENCY_THRESHOLD = 70  # inclusive
LOW_LITERACY_THRESHOLD = 60       # exclusive
LOW_WATER_THRESHOLD = 60          # exclusive

# Display limits
CATEGORY_MATCH_LIMIT = 6
OCCUPATION_MATCH_LIMIT = 5
ADDITIONAL_RECOMMENDATION_LIMIT = 3
AGRICULTURE_RULE_LIMIT = 2
SELECTED_VILLAGE_LIMIT = 3
FOREST_QUERY_LIMIT = 3
