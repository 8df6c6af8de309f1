"""
상수 정의
"""

# 환산 공식 상수
BASE_TOTAL_MULTIPLIER = 3        # 국/수/탐 가중 평균 → 총점 스케일
ENGLISH_FALLBACK_DIVISOR = 4     # 영어 가중치가 0인 대학의 영어 가감 완화 계수

# 성적 레코드 저장
RECORD_FILENAME = "record.parquet"
RECORD_ROWS = ("standard_score", "percentile", "rank")

# 표시용 반올림 자릿수
DISPLAY_DECIMALS = 2
