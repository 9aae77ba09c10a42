# secretseal/crypto/memory.py
from contextlib import contextmanager
from typing import Iterator, Union

Buffer = Union[bytearray, memoryview]

def wipe(buf: Buffer) -> None:
    """가변 버퍼를 제자리에서 0으로 덮어쓴다 (bytes 처럼 불변 객체는 불가)"""
    if isinstance(buf, memoryview):
        if buf.readonly:
            raise TypeError("cannot wipe a read-only buffer")
        buf = buf.cast("B")
        buf[:] = bytes(len(buf))
        return
    if not isinstance(buf, bytearray):
        raise TypeError("only bytearray or writable memoryview can be wiped")
    buf[:] = bytes(len(buf))

def release(buf: bytearray) -> None:
    """
    수동 관리 버퍼 해제: 0으로 지운 뒤 길이 0으로 줄인다.
    이미 해제된(길이 0) 버퍼에 다시 호출하면 아무 일도 하지 않음.
    """
    if not buf:
        return
    wipe(buf)
    del buf[:]

@contextmanager
def secret_buffer(size: int) -> Iterator[bytearray]:
    """0으로 초기화된 버퍼를 빌려주고, 블록을 벗어나면 (예외 포함) 반드시 지운다."""
    if size < 0:
        raise ValueError("size must be non-negative")
    buf = bytearray(size)
    try:
        yield buf
    finally:
        release(buf)
