"""
검색/랭킹 정책 플래그
"""

# ━━━ 검색 결과 설정 ━━━
MAX_SEARCH_RESULTS = 50  # YouTube API 검색 시 후보 수 (쇼츠 필터링 대비 over-fetch)
RESULT_LIMIT = 20        # 최종 반환 개수
SEARCH_TYPE = "video"    # 검색 타입 필터

# ━━━ 쇼츠 판별 ━━━
SHORT_FORM_MAX_SECONDS = 60  # 이 길이 이하이면 쇼츠로 간주
SHORT_FORM_KEYWORDS = (
    "shorts",
    "short",
    "#shorts",
    "#short",
    "쇼츠",
    "숏츠",
    "#쇼츠",
    "#숏츠",
    "숏폼",
)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# 랭킹 가중치 (합계 = 1.0)
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

WEIGHT_RECENCY = 0.5      # 최신성
WEIGHT_VIEWS = 0.3        # 조회수
WEIGHT_SUBSCRIBERS = 0.2  # 채널 구독자 수

RECENCY_WINDOW_DAYS = 365  # 이 기간이 지나면 최신성 점수 0

# ━━━ 캐시 ━━━
CACHE_TTL_SECONDS = 6 * 60 * 60  # 6시간
RESULT_KEY_PREFIX = "search_"
SUBSCRIBER_KEY_PREFIX = "channel_subs_"
CACHE_MAX_ENTRIES = 1024  # 메모리 캐시 최대 항목 수 (초과 시 LRU 제거)
