# backend/catalog/core/revalidation.py

import logging
from collections import defaultdict
from typing import Callable, Dict, List

logger = logging.getLogger(__name__)

PRODUCTS_PATH = "/products"

# path -> 캐시 무효화 콜백 목록 (프론트 캐시, CDN 등 외부에서 등록)
_listeners: Dict[str, List[Callable[[str], None]]] = defaultdict(list)


def register_listener(path: str, callback: Callable[[str], None]) -> None:
    _listeners[path].append(callback)


def clear_listeners() -> None:
    _listeners.clear()


def revalidate_path(path: str) -> int:
    """path에 등록된 콜백을 모두 호출하고 호출 횟수를 반환합니다."""
    callbacks = list(_listeners.get(path, []))
    # 실패한 콜백은 로그만 남기고 나머지는 계속 호출
    for callback in callbacks:
        try:
            callback(path)
        except Exception:
            logger.exception("revalidation listener failed for %s", path)
    logger.info("revalidated %s (%d listeners)", path, len(callbacks))
    return len(callbacks)
