# secretseal/sealer.py
import logging
from typing import NamedTuple, Optional, Union

from secretseal.crypto.box import seal_bytes, sealed_length
from secretseal.crypto.codec import decode_public_key, encode_into, encode_text, required_capacity
from secretseal.config import DEFAULT_OUTPUT_CAPACITY
from secretseal.crypto.memory import secret_buffer, wipe
from secretseal.crypto.sodium import require_initialized
from secretseal.errors import (
    Status, SealError, InvalidArgument, InvalidKeyEncoding, SealingFailed,
    BufferTooSmall, EncodingFailed, InitFailed,
)

logger = logging.getLogger(__name__)

Plaintext = Union[str, bytes, bytearray, memoryview]


class SealResult(NamedTuple):
    status: Status
    # 성공: 텍스트 길이 / BUFFER_TOO_SMALL: 필요한 용량 / 그 외: 입력 용량 그대로
    length: int

    @property
    def ok(self) -> bool:
        return self.status == Status.SUCCESS


class SealedSecret(NamedTuple):
    """시크릿 API PUT 페이로드 형태 ({encrypted_value, key_id})"""
    encrypted_value: str
    key_id: Optional[str] = None

    def as_payload(self) -> dict:
        payload = {"encrypted_value": self.encrypted_value}
        if self.key_id is not None:
            payload["key_id"] = self.key_id
        return payload


def _plaintext_bytes(plaintext: Plaintext) -> bytes:
    if isinstance(plaintext, str):
        try:
            return plaintext.encode("utf-8")
        except UnicodeEncodeError:
            # 짝 없는 surrogate 등
            raise InvalidArgument("plaintext is not valid UTF-8 text")
    if isinstance(plaintext, (bytes, bytearray, memoryview)):
        return bytes(plaintext)
    raise InvalidArgument("plaintext must be str or bytes-like")

def _is_wipeable(plaintext) -> bool:
    if isinstance(plaintext, bytearray):
        return True
    return isinstance(plaintext, memoryview) and not plaintext.readonly

def _check_arguments(public_key_b64, plaintext) -> bytes:
    # 1단계: 누락/빈 값 검사. 여기서 걸리면 암호 프리미티브는 호출되지 않음
    if not public_key_b64:
        raise InvalidArgument("public key is required")
    if plaintext is None:
        raise InvalidArgument("plaintext is required")
    data = _plaintext_bytes(plaintext)
    if not data:
        raise InvalidArgument("plaintext must not be empty")
    return data

def _seal_raw(public_key_b64, plaintext) -> bytes:
    """인자 검사 → 디코드 → 봉인. 어느 단계든 실패하면 그 단계의 오류 그대로 전파"""
    data = _check_arguments(public_key_b64, plaintext)
    require_initialized()
    pk = decode_public_key(public_key_b64)
    ct = seal_bytes(pk, data)
    logger.debug("sealed %d plaintext bytes into %d ciphertext bytes", len(data), len(ct))
    return ct

def seal_secret(public_key_b64: Union[str, bytes], plaintext: Plaintext, *, wipe_plaintext: bool = False) -> str:
    """
    공개키(base64)로 시크릿을 sealed box 로 암호화해 base64 문자열로 반환.
    실패 시 SealError 하위 예외 발생.
    wipe_plaintext=True 이고 plaintext 가 가변 버퍼면 봉인 후 0으로 지운다.
    """
    try:
        ct = _seal_raw(public_key_b64, plaintext)
    finally:
        if wipe_plaintext and _is_wipeable(plaintext):
            wipe(plaintext)
    return encode_text(ct)

def seal_for_api(public_key_b64: Union[str, bytes], plaintext: Plaintext, key_id: Optional[str] = None) -> SealedSecret:
    return SealedSecret(encrypted_value=seal_secret(public_key_b64, plaintext), key_id=key_id)

def required_capacity_for(plaintext_len: int) -> int:
    """seal_into 에 넘길 버퍼 크기 (base64 텍스트 + NUL)"""
    return required_capacity(sealed_length(plaintext_len))

def seal_into(public_key_b64: Union[str, bytes], plaintext: Plaintext, out: bytearray, capacity: int) -> SealResult:
    """
    호출자 소유 버퍼에 기록하는 상태 코드 반환형 경계 함수. 예외를 던지지 않는다.
    - 용량 부족: BUFFER_TOO_SMALL, length=필요 용량 (out 은 건드리지 않음)
    - 성공: SUCCESS, length=텍스트 길이 (out[length] == 0)
    """
    if not isinstance(out, bytearray) or capacity is None or capacity < 0:
        return SealResult(Status.INVALID_ARGUMENT, capacity or 0)
    try:
        ct = _seal_raw(public_key_b64, plaintext)
        written = encode_into(ct, out, capacity)
    except BufferTooSmall as e:
        return SealResult(e.status, e.required)
    except SealError as e:
        if e.recoverable:
            logger.warning("seal rejected: %s", e.status.name)
        else:
            logger.error("seal failed: %s (%s)", e.status.name, e.detail)
        return SealResult(e.status, capacity)
    return SealResult(Status.SUCCESS, written)

_STATUS_ERRORS = {
    Status.INVALID_ARGUMENT: InvalidArgument,
    Status.INVALID_KEY_ENCODING: InvalidKeyEncoding,
    Status.SEALING_FAILED: SealingFailed,
    Status.ENCODING_FAILED: EncodingFailed,
    Status.INIT_FAILED: InitFailed,
}

def seal_buffered(public_key_b64: Union[str, bytes], plaintext: Plaintext, capacity: int = DEFAULT_OUTPUT_CAPACITY) -> str:
    """
    고정 크기 버퍼(기본 8KB)로 seal_into 를 호출하고 결과 텍스트를 돌려준다.
    버퍼는 사용 후 0으로 지워짐. 실패 시 상태 코드에 맞는 SealError 발생.
    """
    with secret_buffer(capacity) as out:
        res = seal_into(public_key_b64, plaintext, out, capacity)
        if res.status == Status.BUFFER_TOO_SMALL:
            raise BufferTooSmall(res.length)
        if not res.ok:
            raise _STATUS_ERRORS[res.status]()
        return out[:res.length].decode("ascii")
