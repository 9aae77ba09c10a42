# secretseal/main.py
import json

from fastapi import FastAPI
from fastapi.encoders import jsonable_encoder
from fastapi.responses import Response

from secretseal.config import APP_NAME, configure_logging
from secretseal.crypto.sodium import init_crypto, is_initialized
from secretseal.errors import Status
from secretseal.routers.secrets import router as secrets_router

class UTF8JSONResponse(Response):
    media_type = "application/json; charset=utf-8"
    def render(self, content) -> bytes:
        return json.dumps(jsonable_encoder(content), ensure_ascii=False).encode("utf-8")

configure_logging()

# 봉인 요청을 받기 전에 libsodium 초기화가 끝나야 함. 실패하면 기동 자체를 중단
if init_crypto() != Status.SUCCESS:
    raise RuntimeError("libsodium initialization failed")

app = FastAPI(title=APP_NAME, default_response_class=UTF8JSONResponse)
app.include_router(secrets_router)


@app.get("/")
def ping():
    return {"ok": True, "sodium": is_initialized()}
