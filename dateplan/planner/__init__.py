"""데이트 플랜 생성 로직 모음."""

from dateplan.planner.diverse import generate_diverse
from dateplan.planner.eligibility import filter_enabled_templates, is_template_satisfiable
from dateplan.planner.genres import filter_area_spots, list_area_genres, list_areas, parse_genres
from dateplan.planner.max_fill import generate_max_fill

__all__ = [
    "parse_genres",
    "filter_area_spots",
    "list_areas",
    "list_area_genres",
    "generate_max_fill",
    "generate_diverse",
    "filter_enabled_templates",
    "is_template_satisfiable",
]
