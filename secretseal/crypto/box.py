# secretseal/crypto/box.py
import logging

from nacl.bindings import crypto_box_SEALBYTES
from nacl.exceptions import CryptoError
from nacl.public import PublicKey, SealedBox

from secretseal.errors import SealingFailed

logger = logging.getLogger(__name__)

# 임시(ephemeral) 공개키 32B + MAC 16B
SEAL_OVERHEAD = crypto_box_SEALBYTES

def sealed_length(plaintext_len: int) -> int:
    if plaintext_len < 0:
        raise ValueError("length must be non-negative")
    return plaintext_len + SEAL_OVERHEAD

def seal_bytes(public_key: bytes, plaintext: bytes) -> bytes:
    """
    수신자 공개키(raw 32B)로 익명 sealed box 암호화.
    발신자 인증 없음: 수신자는 누가 보냈는지 확인할 수 없다.
    매 호출마다 임시 키쌍이 새로 생성되므로 같은 입력도 결과가 매번 다름.
    """
    try:
        sealed = SealedBox(PublicKey(bytes(public_key)))
        ct = sealed.encrypt(bytes(plaintext))  # 임시 키쌍/nonce 는 내부적으로 처리
    except (CryptoError, TypeError, ValueError) as e:
        logger.error("crypto_box_seal failed: %s", e)
        raise SealingFailed(f"sealing failed: {e}")

    if len(ct) != sealed_length(len(plaintext)):
        logger.error("sealed box has unexpected length %d", len(ct))
        raise SealingFailed("unexpected ciphertext length")
    return ct
