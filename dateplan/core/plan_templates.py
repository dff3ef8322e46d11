"""데이트 플랜 템플릿 카탈로그."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

from pydantic import TypeAdapter

from dateplan.core.logger import get_logger
from dateplan.schemas.plan import AUTO_TEMPLATE_ID, PlanTemplate

logger = get_logger(__name__)

AUTO_TEMPLATE = PlanTemplate(id=AUTO_TEMPLATE_ID, name="おまかせ", steps=[])

PLAN_TEMPLATES: tuple[PlanTemplate, ...] = (
    AUTO_TEMPLATE,
    PlanTemplate(
        id="classic-5",
        name="王道5ステップ（ランチ→体験→カフェ→ディナー→夜景）",
        steps=["ランチ", "体験施設", "カフェ", "ディナー", "夜景"],
    ),
    PlanTemplate(
        id="light-4",
        name="軽め4ステップ（ランチ→体験→カフェ→ディナー）",
        steps=["ランチ", "体験施設", "カフェ", "ディナー"],
    ),
    PlanTemplate(
        id="anniversary-5",
        name="記念日5ステップ（ランチ→体験→カフェ→ディナー→記念日用）",
        steps=["ランチ", "体験施設", "カフェ", "ディナー", "記念日用"],
    ),
    PlanTemplate(
        id="xmas-5",
        name="冬デート（ランチ→体験→カフェ→ディナー→クリスマスマーケット）",
        steps=["ランチ", "体験施設", "カフェ", "ディナー", "クリスマスマーケット"],
    ),
)

_TEMPLATE_LIST_ADAPTER = TypeAdapter(list[PlanTemplate])


def load_plan_templates(path: str | Path | None = None) -> list[PlanTemplate]:
    """템플릿 카탈로그를 반환한다.

    path가 주어지면 JSON 배열을 읽어 검증하고, auto 템플릿이 없으면 맨 앞에 추가한다.
    잘못된 JSON 구조는 `pydantic.ValidationError`로 전파된다.

    Args:
        path: 템플릿 JSON 파일 경로 (없으면 기본 카탈로그)

    Returns:
        템플릿 목록
    """
    if path is None:
        return list(PLAN_TEMPLATES)

    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    templates = _TEMPLATE_LIST_ADAPTER.validate_python(raw)
    if not any(template.is_auto for template in templates):
        templates.insert(0, AUTO_TEMPLATE)

    logger.info("Loaded %d plan templates from %s", len(templates), path)
    return templates


def find_template(templates: Sequence[PlanTemplate], template_id: str) -> PlanTemplate | None:
    """ID로 템플릿을 찾는다."""
    return next((template for template in templates if template.id == template_id), None)
