"""장르 다양성을 최대화하는 "おまかせ" 플랜 생성기."""

from __future__ import annotations

from typing import Sequence

from dateplan.core.logger import get_logger
from dateplan.core.randomness import RandomSource, build_random_source, pick_random
from dateplan.planner.genres import filter_area_spots, parse_genres
from dateplan.schemas.plan import AUTO_TEMPLATE_ID, GeneratedPlan, PlanItem
from dateplan.schemas.spot import Spot

logger = get_logger(__name__)

DEFAULT_MAX_STEPS = 5
DEFAULT_FALLBACK_GENRE = "おすすめ"
DEFAULT_AUTO_TEMPLATE_NAME = "おまかせ"

# 결과가 "정석 코스"처럼 보이도록 하는 표시 순서. 우선순위 제약은 아니다.
DEFAULT_PREFERRED_GENRES: tuple[str, ...] = (
    "ランチ",
    "体験施設",
    "遊び",
    "カフェ",
    "ディナー",
    "夜景",
    "記念日用",
    "クリスマスマーケット",
)


def _pick_for_genres(
    genre_candidates: Sequence[str],
    available: Sequence[Spot],
    spot_genres: dict[str, list[str]],
    rng: RandomSource,
) -> tuple[Spot, str] | None:
    """장르 후보를 순서대로 시도해 처음으로 스폿이 있는 장르에서 하나를 고른다."""
    for genre in genre_candidates:
        candidates = [spot for spot in available if genre in spot_genres[spot.id]]
        picked = pick_random(candidates, rng)
        if picked is not None:
            return picked, genre
    return None


def generate_diverse(
    spots: Sequence[Spot],
    area: str,
    max_steps: int = DEFAULT_MAX_STEPS,
    *,
    rng: RandomSource | None = None,
    preferred_genres: Sequence[str] = DEFAULT_PREFERRED_GENRES,
    fallback_genre: str = DEFAULT_FALLBACK_GENRE,
    template_name: str = DEFAULT_AUTO_TEMPLATE_NAME,
) -> GeneratedPlan | None:
    """다양한 장르를 가능한 많이 포함하도록 탐욕적으로 플랜을 생성합니다.

    1) 지역 내 스폿의 전체 장르 집합을 만든다.
    2) 아직 근거로 쓰이지 않은 장르를 우선해 스폿을 고른다.
       `preferred_genres`에 남아 있는 장르가 있으면 그 순서대로 먼저 시도한다.
    3) 장르로 고를 수 없으면 남은 스폿 중 하나를 폴백 장르로 채운다.
    4) 최대 `max_steps`개까지, 남은 스폿이 없으면 그 전에 끝난다.

    Args:
        spots: 스폿 카탈로그
        area: 대상 지역
        max_steps: 최대 스텝 수
        rng: 후보 선택에 사용할 난수 소스
        preferred_genres: 우선 시도할 장르 순서
        fallback_genre: 장르 매칭 없이 채운 스텝에 붙일 값
        template_name: 결과 플랜의 템플릿 이름

    Returns:
        생성된 플랜. 지역에 스폿이 하나도 없으면 None.
    """
    area_spots = filter_area_spots(spots, area)
    if not area_spots:
        logger.info("No spots in area %s; diverse plan not generated", area)
        return None

    random_source = rng or build_random_source()
    spot_genres = {spot.id: parse_genres(spot.genre) for spot in area_spots}

    # dict로 삽입 순서를 유지하는 집합을 표현한다.
    unused_genres: dict[str, None] = {}
    for spot in area_spots:
        for genre in spot_genres[spot.id]:
            unused_genres.setdefault(genre, None)

    used_spot_ids: set[str] = set()
    items: list[PlanItem] = []

    for _ in range(max_steps):
        available = [spot for spot in area_spots if spot.id not in used_spot_ids]
        if not available:
            break

        preferred_unused = [genre for genre in preferred_genres if genre in unused_genres]
        genre_candidates = preferred_unused or list(unused_genres)

        picked = _pick_for_genres(genre_candidates, available, spot_genres, random_source)
        if picked is None:
            spot = pick_random(available, random_source)
            logger.debug("Genres exhausted in area %s; filling step %d with %s", area, len(items), spot.id)
            picked = (spot, fallback_genre)
        else:
            # 근거로 쓴 장르만 소진한다. 폴백 장르는 애초에 집합에 없다.
            unused_genres.pop(picked[1], None)

        spot, matched_genre = picked
        used_spot_ids.add(spot.id)
        items.append(
            PlanItem(
                step_index=len(items),
                step_genre=matched_genre,
                matched_genre=matched_genre,
                spot=spot,
                spot_genres=spot_genres[spot.id],
            )
        )

    return GeneratedPlan(
        area=area,
        template_id=AUTO_TEMPLATE_ID,
        template_name=template_name,
        items=items,
        missing_genres=list(unused_genres),
    )
