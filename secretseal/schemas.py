# secretseal/schemas.py
from pydantic import BaseModel, Field
from typing import Optional, Union, List, Dict

# 단건 봉인 요청
class SealIn(BaseModel):
    public_key: str = Field(..., description="수신자 공개키 (base64, 32바이트)")
    value: str = Field(..., description="암호화할 시크릿 값")
    key_id: Optional[str] = None

# 봉인 응답 ({encrypted_value, key_id} 는 시크릿 API PUT 페이로드 그대로)
class SealOut(BaseModel):
    encrypted_value: str
    key_id: Optional[str] = None
    length: int

# 같은 키로 여러 시크릿 봉인. 리스트 값은 "\n" 으로 합쳐서 하나의 값으로 취급
class SealBatchIn(BaseModel):
    public_key: str
    key_id: Optional[str] = None
    secrets: Dict[str, Union[str, List[str]]]

class SealBatchOut(BaseModel):
    key_id: Optional[str] = None
    secrets: Dict[str, SealOut]

# 버퍼 크기 조회 응답
class CapacityOut(BaseModel):
    plaintext_length: int
    sealed_length: int
    encoded_length: int
    required_capacity: int
