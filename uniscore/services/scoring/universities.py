"""
지원 대학 목록
"""
from enum import Enum

from .exceptions import UnknownUniversity


class University(str, Enum):
    """환산 대상 대학 (값 = 내부 코드)"""

    KYUNGHEE = "KYUNGHEE"
    DONGGUK = "DONGGUK"
    SEOULSCITECH = "SEOULSCITECH"
    KWANGWOON = "KWANGWOON"
    INHA = "INHA"
    ERICA = "ERICA"
    SEJONG = "SEJONG"
    KOOKMIN = "KOOKMIN"
    AJU = "AJU"
    SOONGSIL = "SOONGSIL"
    KONKUK = "KONKUK"
    CATHOLIC = "CATHOLIC"
    CHUNGANG = "CHUNGANG"
    SEOUL = "SEOUL"
    SOGANG = "SOGANG"

    @property
    def display_name(self) -> str:
        return DISPLAY_NAMES[self]

    @classmethod
    def from_label(cls, label: str) -> "University":
        """
        내부 코드("KYUNGHEE") 또는 표시 이름("경희대(서울)")으로 대학 조회
        대소문자/앞뒤 공백은 무시
        """
        key = label.strip()
        if key.upper() in cls.__members__:
            return cls[key.upper()]
        for univ, name in DISPLAY_NAMES.items():
            if key == name:
                return univ
        raise UnknownUniversity(label)


DISPLAY_NAMES = {
    University.KYUNGHEE: "경희대(서울)",
    University.DONGGUK: "동국대",
    University.SEOULSCITECH: "서울과기대",
    University.KWANGWOON: "광운대",
    University.INHA: "인하대",
    University.ERICA: "한양대(ERICA)",
    University.SEJONG: "세종대",
    University.KOOKMIN: "국민대",
    University.AJU: "아주대",
    University.SOONGSIL: "숭실대",
    University.KONKUK: "건국대",
    University.CATHOLIC: "가톨릭대",
    University.CHUNGANG: "중앙대",
    University.SEOUL: "서울시립대",
    University.SOGANG: "서강대",
}
