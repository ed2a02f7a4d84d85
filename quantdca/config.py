import os

# 캐시 파일은 기본적으로 현재 작업 디렉토리에 저장합니다.
CACHE_DIR = os.environ.get("QUANTDCA_CACHE_DIR", ".")

DEFAULT_SYMBOLS = ["AAPL", "MSFT", "AMZN", "TSLA", "META", "AMD", "GOOG"]
DEFAULT_FROM_DATE = "2008-01-01"
DEFAULT_AMOUNT = 500.00

# NASDAQ 히스토리컬 시세 API
NASDAQ_BASE_URL = "https://api.nasdaq.com/api/quote"
NASDAQ_ROW_LIMIT = 9999

# 브라우저 요청처럼 보이지 않으면 NASDAQ 서버가 요청을 거부합니다.
REQUEST_HEADERS = {
    "accept": "application/json",
    "accept-encoding": "gzip",
    "accept-language": "en-US,en",
    "origin": "https://www.nasdaq.com",
    "referer": "https://www.nasdaq.com/",
    "user-agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/126.0.0.0 Safari/537.36"
    ),
}

REQUEST_TIMEOUT = 30  # 초
MAX_RETRIES = 3
RETRY_DELAY = 1.0  # 초
