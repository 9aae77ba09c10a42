# secretseal/crypto/sodium.py
import logging
import threading

from nacl import bindings
from nacl.exceptions import CryptoError

from secretseal.errors import Status, InitFailed

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_initialized = False

def init_crypto() -> Status:
    """
    libsodium 초기화 (프로세스당 1회). 여러 번 호출해도 안전.
    실패 시 예외 대신 Status.INIT_FAILED 반환 → 호출측에서 기동 중단.
    """
    global _initialized
    if _initialized:
        return Status.SUCCESS
    with _lock:
        if _initialized:
            return Status.SUCCESS
        try:
            bindings.sodium_init()
        except (CryptoError, RuntimeError) as e:
            logger.error("libsodium initialization failed: %s", e)
            return Status.INIT_FAILED
        _initialized = True
    logger.info("libsodium initialized")
    return Status.SUCCESS

def is_initialized() -> bool:
    return _initialized

def require_initialized() -> None:
    # 초기화 전 봉인 호출은 치명적 전제조건 위반
    if not _initialized:
        raise InitFailed("crypto not initialized, call init_crypto() first")
