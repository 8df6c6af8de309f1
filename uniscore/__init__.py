"""
uniscore: 수능 성적 → 대학별 정시 환산점수 계산
"""

__version__ = "1.0.0"
