"""
Request Options

호출자가 전달한 쿼리 옵션을 오퍼레이션 카테고리별로 검증하고
GoalServe 업스트림 파라미터 이름으로 변환합니다.
"""

from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


TRUTHY_FLAGS = {"1", "true"}
FALSY_JSON_FLAGS = {"0", "false"}


class OptionSet(Enum):
    """오퍼레이션별 허용 옵션 카테고리 (논리 이름 목록)"""

    NONE = ()
    DATE_RANGE = ("date1", "date2")
    SCHEDULE = ("showOdds", "date1", "date2", "bm", "market")

    @property
    def names(self) -> tuple[str, ...]:
        return self.value


class RequestOptions(BaseModel):
    """
    호출자 쿼리 옵션

    - 알 수 없는 키는 무시 (에러 아님)
    - 빈 문자열은 미지정으로 취급
    - showOdds: "1" / "true" 만 참 (대소문자, 공백 구분)
    - json: "0" / "false" 인 경우에만 비-JSON 응답 요청
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    show_odds: bool = Field(default=False, alias="showOdds")
    date1: Optional[str] = None
    date2: Optional[str] = None
    bm: Optional[str] = None
    market: Optional[str] = None
    json_format: bool = Field(default=True, alias="json")

    @field_validator("show_odds", mode="before")
    @classmethod
    def _parse_show_odds(cls, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if value is None:
            return False
        return str(value) in TRUTHY_FLAGS

    @field_validator("json_format", mode="before")
    @classmethod
    def _parse_json_format(cls, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if value is None:
            return True
        return str(value) not in FALSY_JSON_FLAGS

    @field_validator("date1", "date2", "bm", "market", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        value = str(value).strip()
        return value or None

    @classmethod
    def from_query(cls, query: Optional[Mapping[str, Any]]) -> "RequestOptions":
        """쿼리 파라미터 매핑에서 옵션 생성"""
        if not query:
            return cls()
        return cls.model_validate(dict(query))

    def to_upstream(self, option_set: OptionSet) -> dict[str, Any]:
        """
        허용된 옵션 중 호출자가 명시한 것만 업스트림 파라미터로 변환

        Returns:
            dict: 예) {"showodds": 1, "date1": "01.01.2025"}
        """
        allowed = option_set.names
        params: dict[str, Any] = {}

        if "showOdds" in allowed and self.show_odds:
            params["showodds"] = 1
        for name in ("date1", "date2", "bm", "market"):
            value = getattr(self, name)
            if name in allowed and value is not None:
                params[name] = value

        return params


def echo_params(
    path_params: Mapping[str, str],
    query: Optional[Mapping[str, Any]],
    option_set: OptionSet,
) -> dict[str, Any]:
    """메타데이터용 호출자 논리 파라미터 (경로 파라미터 + 인식된 쿼리 원문)"""
    echoed: dict[str, Any] = dict(path_params)
    if not query:
        return echoed

    for name in option_set.names + ("json",):
        value = query.get(name)
        if value is not None and str(value).strip():
            echoed[name] = value
    return echoed
