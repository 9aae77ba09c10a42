# secretseal/errors.py
from enum import IntEnum


class Status(IntEnum):
    # 값은 경계(boundary) 계약에 고정된 코드. 단계 순서대로 정렬됨
    SUCCESS = 0
    INVALID_ARGUMENT = -1
    INVALID_KEY_ENCODING = -2
    SEALING_FAILED = -3
    BUFFER_TOO_SMALL = -4
    ENCODING_FAILED = -5
    INIT_FAILED = -6


class SealError(Exception):
    """봉인(seal) 경로의 모든 실패의 기반 클래스. status 로 분기한다."""
    status = Status.SEALING_FAILED
    recoverable = False

    def __init__(self, detail: str = ""):
        super().__init__(detail or self.status.name.lower())
        self.detail = detail or self.status.name.lower()


# ── 호출자 입력 오류 (입력을 고치면 재시도 가능) ──
class InvalidArgument(SealError):
    status = Status.INVALID_ARGUMENT
    recoverable = True


class InvalidKeyEncoding(SealError):
    status = Status.INVALID_KEY_ENCODING
    recoverable = True


class BufferTooSmall(SealError):
    status = Status.BUFFER_TOO_SMALL
    recoverable = True

    def __init__(self, required: int):
        super().__init__(f"output buffer too small, {required} bytes required")
        self.required = required


# ── 내부 오류 (같은 입력으로 재시도해도 성공할 수 없음) ──
class SealingFailed(SealError):
    status = Status.SEALING_FAILED


class EncodingFailed(SealError):
    status = Status.ENCODING_FAILED


class InitFailed(SealError):
    status = Status.INIT_FAILED
