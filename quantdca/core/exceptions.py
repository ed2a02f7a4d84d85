"""
예외 정의

DCA 시뮬레이션 실행 중 발생하는 오류 분류입니다.
모든 오류는 실행 전체를 중단시키며 CLI에서 종료 코드 1로 변환됩니다.
"""


class QuantDCAError(Exception):
    """QuantDCA 기본 예외"""


class ConfigurationError(QuantDCAError, ValueError):
    """잘못된 실행 설정 (시작일 > 종료일, 음수 금액 등)"""


class ParseError(QuantDCAError, ValueError):
    """날짜, 금액 문자열 또는 JSON 파싱 실패"""


class NetworkError(QuantDCAError):
    """요청 생성, 전송 또는 응답 압축 해제 실패"""


class EmptyDataError(QuantDCAError):
    """요청한 심볼/기간에 가격 데이터가 없음"""

    def __init__(self, symbol: str, message: str = None):
        self.symbol = symbol
        super().__init__(message or f"No data available for symbol: {symbol!r}")
