# secretseal/crypto/codec.py
import base64
import binascii
import logging
from typing import Union

from nacl.bindings import crypto_box_PUBLICKEYBYTES

from secretseal.errors import InvalidKeyEncoding, BufferTooSmall, EncodingFailed

logger = logging.getLogger(__name__)

PUBLIC_KEY_BYTES = crypto_box_PUBLICKEYBYTES  # X25519 = 32

def decode_public_key(text: Union[str, bytes], expected_len: int = PUBLIC_KEY_BYTES) -> bytes:
    """
    입력: base64(표준 알파벳, '=' 패딩 필수) 문자열
    출력: 정확히 expected_len 바이트의 raw 공개키.
    공백/알파벳 외 문자/잘못된 패딩/길이 불일치 → InvalidKeyEncoding
    """
    if isinstance(text, str):
        try:
            data = text.encode("ascii")
        except UnicodeEncodeError:
            raise InvalidKeyEncoding("public key is not ASCII base64")
    elif isinstance(text, (bytes, bytearray)):
        data = bytes(text)
    else:
        raise InvalidKeyEncoding("public key must be base64 text")

    try:
        raw = base64.b64decode(data, validate=True)
    except binascii.Error:
        raise InvalidKeyEncoding("public key is not valid base64")
    # 사용하지 않는 꼬리 비트가 0이 아닌 비정규 인코딩도 거부 (libsodium 과 동일)
    if base64.b64encode(raw) != data:
        raise InvalidKeyEncoding("public key is not canonical base64")

    if len(raw) != expected_len:
        raise InvalidKeyEncoding(f"public key must decode to {expected_len} bytes, got {len(raw)}")
    return raw

def encoded_length(n: int) -> int:
    """n 바이트를 패딩 포함 base64로 만들었을 때의 문자 수"""
    if n < 0:
        raise ValueError("length must be non-negative")
    return 4 * ((n + 2) // 3)

def required_capacity(n: int) -> int:
    # 텍스트 + NUL 종단 1바이트 (C 문자열 규약)
    return encoded_length(n) + 1

def encode_text(data: bytes) -> str:
    try:
        return base64.b64encode(data).decode("ascii")
    except (TypeError, ValueError) as e:
        raise EncodingFailed(f"base64 encode failed: {e}")

def encode_into(data: bytes, out: bytearray, capacity: int) -> int:
    """
    data 를 base64로 out 에 기록하고 NUL 로 끝낸다. 반환: 텍스트 길이(NUL 제외).
    capacity 가 부족하면 아무것도 쓰지 않고 BufferTooSmall(required) 발생.
    capacity 는 호출자가 선언한 크기이며 out 의 실제 길이를 넘을 수 없다.
    """
    required = required_capacity(len(data))
    usable = min(capacity, len(out))
    if usable < required:
        logger.debug("output capacity %d < required %d", usable, required)
        raise BufferTooSmall(required)

    text = encode_text(data).encode("ascii")
    if len(text) + 1 != required:
        raise EncodingFailed("unexpected base64 output length")
    out[0:len(text)] = text
    out[len(text)] = 0
    return len(text)
