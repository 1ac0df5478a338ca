#!/usr/bin/env python3
"""
로컬 HashID 확인용 스크립트 (AWS 없이 Python만 사용)

사용법:
  python3 scripts/local_run.py encode 1234567890
  python3 scripts/local_run.py decode kf12oi
  python3 scripts/local_run.py decode KF12OI --case-sensitive
"""

import argparse
import os
import sys

# 프로젝트 루트의 src 폴더를 경로에 추가 (hashid 임포트용)
_PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
_SRC = os.path.join(_PROJECT_ROOT, "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)

from common.hashid import encode, decode, sanitize


def encode_number(raw: str) -> str:
    """
    10진수 문자열을 정수로 바꾼 뒤 Base36 해시를 반환합니다.
    """
    raw = (raw or "").strip()
    try:
        number = int(raw)
    except ValueError:
        raise ValueError(f"정수가 아닙니다: {raw!r}")
    hash_id = encode(number)
    print(f"  [Base36 인코딩] {number} → \"{hash_id}\"")
    return hash_id


def decode_hash(hash_id: str, insensitive: bool = True) -> int:
    """
    해시를 정수로 되돌립니다. 알파벳 외 문자는 무시됩니다.
    """
    normalized = sanitize(hash_id, insensitive)
    if normalized != hash_id:
        print(f"  [정규화] \"{hash_id}\" → \"{normalized}\"")
    number = decode(hash_id, insensitive)
    print(f"  [Base36 디코딩] \"{normalized}\" → {number}")
    return number


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="로컬 HashID: encode(정수→해시) / decode(해시→정수)"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_encode = sub.add_parser("encode", help="정수를 Base36 해시로 변환합니다")
    p_encode.add_argument("number", help="0 이상의 정수 (예: 1234567890)")

    p_decode = sub.add_parser("decode", help="Base36 해시를 정수로 변환합니다")
    p_decode.add_argument("hash", help="해시 문자열 (예: kf12oi)")
    p_decode.add_argument(
        "--case-sensitive",
        action="store_true",
        help="대문자를 소문자로 바꾸지 않습니다 (대문자는 무시됨)",
    )

    args = parser.parse_args(argv)

    if args.command == "encode":
        try:
            hash_id = encode_number(args.number)
        except ValueError as e:
            print(f"오류: {e}", file=sys.stderr)
            sys.exit(1)
        print(f"hash: {hash_id}")

    elif args.command == "decode":
        number = decode_hash(args.hash, insensitive=not args.case_sensitive)
        print(f"number: {number}")


if __name__ == "__main__":
    main()
