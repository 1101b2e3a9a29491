# backend/catalog/core/utils.py

import json
import math
from typing import Iterable, List, Optional


# 전체 개수와 페이지 크기로 마지막 페이지 번호 계산
def last_page(total_count: int, page_size: int) -> int:
    return math.ceil(total_count / page_size)


# ["a", "b"] -> "a,b"
def encode_list(values: Optional[Iterable]) -> Optional[str]:
    if values is None:
        return None
    return ",".join(str(v).strip() for v in values)


# "a,b" 또는 '["a", "b"]' 둘 다 리스트로 변환
def decode_list(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    raw = raw.strip()
    if raw.startswith("["):
        try:
            return [str(v).strip() for v in json.loads(raw)]
        except ValueError:
            raw = raw.strip("[]")
    return [part.strip().strip('"') for part in raw.split(",") if part.strip()]
