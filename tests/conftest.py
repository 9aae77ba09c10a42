# --------------------------------------------------------------
# File: conftest.py
# Description: 공용 fixture (libsodium 초기화, 테스트 키쌍, 복호화 헬퍼).
# --------------------------------------------------------------

import base64
from typing import Callable

import pytest
from nacl.public import PrivateKey, SealedBox

from secretseal.crypto.sodium import init_crypto
from secretseal.errors import Status

# 32바이트로 디코딩되는 고정 공개키 ("foobar" * 5 + "00")
FIXED_PUBLIC_KEY_B64 = "Zm9vYmFyZm9vYmFyZm9vYmFyZm9vYmFyZm9vYmFyMDA="


@pytest.fixture(autouse=True)
def _sodium_ready() -> None:
    """모든 테스트 전에 libsodium 초기화가 끝나 있도록 보장한다."""
    assert init_crypto() == Status.SUCCESS


@pytest.fixture
def keypair() -> PrivateKey:
    return PrivateKey.generate()


@pytest.fixture
def public_key_b64(keypair: PrivateKey) -> str:
    return base64.b64encode(bytes(keypair.public_key)).decode()


@pytest.fixture
def open_sealed(keypair: PrivateKey) -> Callable[[str], bytes]:
    """독립적인 참조 구현(PyNaCl SealedBox)으로 base64 봉인 텍스트를 연다.

    Args:
        keypair (PrivateKey): 수신자 개인키.

    Returns:
        Callable[[str], bytes]: base64 텍스트를 받아 평문을 돌려주는 함수.
    """

    def _open(text: str) -> bytes:
        return SealedBox(keypair).decrypt(base64.b64decode(text, validate=True))

    return _open
