# debug.py
from secretseal.config import DEFAULT_OUTPUT_CAPACITY
from secretseal.crypto.sodium import init_crypto
from secretseal.sealer import seal_buffered, seal_into, required_capacity_for

PUBLIC_KEY = "Zm9vYmFyZm9vYmFyZm9vYmFyZm9vYmFyZm9vYmFyMDA="
if __name__ == "__main__":
    print("INIT:", init_crypto().name)
    secret = b"hello"
    buf = bytearray(0)
    res = seal_into(PUBLIC_KEY, secret, buf, 0)
    print("SIZE:", res.status.name, "required =", res.length, "expected =", required_capacity_for(len(secret)))
    buf = bytearray(res.length)
    res = seal_into(PUBLIC_KEY, secret, buf, len(buf))
    print("OK:", res.ok)
    print("DATA:", buf[:res.length].decode())
    print("BUFFERED (%d):" % DEFAULT_OUTPUT_CAPACITY, seal_buffered(PUBLIC_KEY, secret))
