"""
파이프라인 단계 실행기 (성공 값 또는 기본값으로 강등)
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class StageResult(Generic[T]):
    """단계 실행 결과"""
    value: T
    degraded: bool = False
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return not self.degraded


async def run_stage(
    name: str,
    fetch: Callable[[], Awaitable[T]],
    *,
    default: T,
    timeout: float | None = None,
) -> StageResult[T]:
    """
    외부 조회 한 건을 실행

    실패/타임아웃 시 예외를 전파하지 않고 default 값으로 강등된 결과를 반환
    """
    try:
        if timeout is None:
            value = await fetch()
        else:
            value = await asyncio.wait_for(fetch(), timeout=timeout)
    except asyncio.TimeoutError as e:
        logger.warning(f"⏱️ {name} 타임아웃 ({timeout}s): 기본값 사용")
        return StageResult(value=default, degraded=True, error=e)
    except Exception as e:
        logger.warning(f"⚠️ {name} 실패: {e} (기본값 사용)")
        return StageResult(value=default, degraded=True, error=e)
    return StageResult(value=value)
