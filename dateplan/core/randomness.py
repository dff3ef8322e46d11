"""플랜 생성에 주입하는 난수 소스."""

from __future__ import annotations

import hashlib
import random
import time
from abc import ABC, abstractmethod
from typing import Sequence, TypeVar

T = TypeVar("T")


class RandomSource(ABC):
    """N개 중 하나를 고르는 연산만 제공하는 난수 인터페이스."""

    @abstractmethod
    def pick_index(self, count: int) -> int:
        """`[0, count)` 범위에서 균등하게 인덱스 하나를 반환합니다.

        Args:
            count: 후보 개수 (1 이상)

        Returns:
            선택된 인덱스
        """
        raise NotImplementedError


class PythonRandomSource(RandomSource):
    """`random.Random` 기반 구현."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def pick_index(self, count: int) -> int:
        if count <= 0:
            raise ValueError("count must be positive")
        return self._rng.randrange(count)


def _entropy_seed() -> int:
    seed_source = f"{time.time_ns()}-{random.getrandbits(64)}"
    seed_hex = hashlib.sha256(seed_source.encode("utf-8")).hexdigest()[:16]
    return int(seed_hex, 16)


def build_random_source(seed: int | None = None) -> RandomSource:
    """요청 단위로 사용할 난수 소스를 만든다.

    seed가 없으면 재생성할 때마다 다른 결과가 나오도록 시각과 엔트로피로 시드를 만든다.
    """
    resolved_seed = _entropy_seed() if seed is None else seed
    return PythonRandomSource(random.Random(resolved_seed))


def pick_random(candidates: Sequence[T], rng: RandomSource) -> T | None:
    """후보 중 하나를 균등하게 고른다. 후보가 없으면 None."""
    if not candidates:
        return None
    return candidates[rng.pick_index(len(candidates))]
