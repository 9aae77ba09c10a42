# secretseal/routers/secrets.py
import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from secretseal.config import MAX_SECRET_BYTES
from secretseal.crypto.box import sealed_length
from secretseal.crypto.codec import encoded_length
from secretseal.errors import SealError
from secretseal.schemas import SealIn, SealOut, SealBatchIn, SealBatchOut, CapacityOut
from secretseal.sealer import seal_for_api, required_capacity_for

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/secrets", tags=["Secrets"])

def _seal_one(public_key: str, value: str, key_id: Optional[str]) -> SealOut:
    try:
        size = len(value.encode("utf-8"))
    except UnicodeEncodeError:
        # JSON 의 "\ud800" 처럼 짝 없는 surrogate 는 UTF-8 로 표현 불가
        raise HTTPException(400, "invalid_argument")
    if size > MAX_SECRET_BYTES:
        raise HTTPException(413, "secret_too_large")
    try:
        sealed = seal_for_api(public_key, value, key_id=key_id)
    except SealError as e:
        # 호출자 입력 오류 → 400, 내부 오류 → 500
        code = 400 if e.recoverable else 500
        if code == 500:
            logger.error("sealing failed: %s", e.detail)
        else:
            logger.warning("seal request rejected: %s", e.status.name)
        raise HTTPException(code, e.status.name.lower())
    return SealOut(
        encrypted_value=sealed.encrypted_value,
        key_id=sealed.key_id,
        length=len(sealed.encrypted_value),
    )

@router.post("/seal", response_model=SealOut)
def seal(body: SealIn):
    """
    공개키로 시크릿 1건 봉인. 결과는 시크릿 API 에 그대로 PUT 가능한 형태.
    (전송 자체는 하지 않음)
    """
    out = _seal_one(body.public_key, body.value, body.key_id)
    logger.info("sealed secret (key_id=%s, %d chars)", body.key_id, out.length)
    return out

@router.post("/seal-batch", response_model=SealBatchOut)
def seal_batch(body: SealBatchIn):
    """같은 키로 여러 이름의 시크릿을 한 번에 봉인"""
    if not body.secrets:
        raise HTTPException(400, "no_secrets")
    sealed = {}
    for name, value in body.secrets.items():
        if isinstance(value, list):
            value = "\n".join(value)
        sealed[name] = _seal_one(body.public_key, value, body.key_id)
    logger.info("sealed %d secrets (key_id=%s)", len(sealed), body.key_id)
    return SealBatchOut(key_id=body.key_id, secrets=sealed)

@router.get("/capacity", response_model=CapacityOut)
def capacity(plaintext_length: int = Query(..., ge=0, description="평문 바이트 수")):
    """seal_into 호출 전 버퍼를 미리 잡고 싶은 호출자를 위한 크기 계산"""
    n = sealed_length(plaintext_length)
    return CapacityOut(
        plaintext_length=plaintext_length,
        sealed_length=n,
        encoded_length=encoded_length(n),
        required_capacity=required_capacity_for(plaintext_length),
    )
