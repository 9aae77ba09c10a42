# secretseal/config.py
import os
import logging
from dotenv import load_dotenv

load_dotenv()

APP_NAME = os.getenv("SECRETSEAL_APP_NAME", "secretseal")
LOG_LEVEL = os.getenv("SECRETSEAL_LOG_LEVEL", "INFO").upper()

# seal_into 호출 시 기본 출력 버퍼 크기 (8KB면 일반적인 시크릿에 충분)
DEFAULT_OUTPUT_CAPACITY = int(os.getenv("SECRETSEAL_OUTPUT_CAPACITY", "8192"))

# 시크릿 API 값 크기 제한 (48KB). HTTP/CLI 경계에서만 검사
MAX_SECRET_BYTES = int(os.getenv("SECRETSEAL_MAX_SECRET_BYTES", str(48 * 1024)))

_logging_configured = False

def configure_logging() -> None:
    global _logging_configured
    if _logging_configured:
        return
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _logging_configured = True
