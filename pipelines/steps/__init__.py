# Namespace for pipeline steps
from .filter_coaches import FilterCoaches  # noqa: F401
from .build_prompts import BuildPrompts  # noqa: F401
from .request_completion import RequestCompletion  # noqa: F401
from .parse_completion import ParseCompletion  # noqa: F401
from .enrich_recommendations import EnrichRecommendations  # noqa: F401
