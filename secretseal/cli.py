#!/usr/bin/env python3
# secretseal/cli.py
import argparse
import json
import sys

from secretseal.config import MAX_SECRET_BYTES, configure_logging
from secretseal.crypto.sodium import init_crypto
from secretseal.errors import SealError, Status
from secretseal.sealer import seal_for_api


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="secretseal",
        description="Encrypt a secret value with a repository public key (libsodium sealed box)",
    )
    parser.add_argument("--public-key", required=True, help="Recipient public key (base64)")
    src = parser.add_mutually_exclusive_group(required=True)
    src.add_argument("--value", help="Plaintext secret value")
    src.add_argument("--stdin", action="store_true", help="Read the secret value from stdin")
    parser.add_argument("--key-id", help="Print a {encrypted_value, key_id} JSON payload instead of bare text")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()

    if init_crypto() != Status.SUCCESS:
        print("error: libsodium initialization failed", file=sys.stderr)
        return abs(Status.INIT_FAILED)

    if args.stdin:
        # 파이프로 넘어온 값의 마지막 개행은 값의 일부로 보지 않음
        value = sys.stdin.buffer.read().rstrip(b"\r\n")
    else:
        try:
            value = args.value.encode("utf-8")
        except UnicodeEncodeError:
            # argv 의 잘못된 바이트는 surrogateescape 로 들어옴
            print("error: invalid_argument: value is not valid UTF-8 text", file=sys.stderr)
            return abs(Status.INVALID_ARGUMENT)

    if len(value) > MAX_SECRET_BYTES:
        print(f"error: secret exceeds {MAX_SECRET_BYTES} bytes", file=sys.stderr)
        return abs(Status.INVALID_ARGUMENT)

    try:
        sealed = seal_for_api(args.public_key, value, key_id=args.key_id)
    except SealError as e:
        print(f"error: {e.status.name.lower()}: {e.detail}", file=sys.stderr)
        return abs(e.status)

    if args.key_id is not None:
        print(json.dumps(sealed.as_payload()))
    else:
        print(sealed.encrypted_value)
    return 0


if __name__ == "__main__":
    sys.exit(main())
