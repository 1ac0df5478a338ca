"""
HashID 변환 람다
GET /encode/{value}                   -> 정수를 Base36 해시로 변환
GET /decode/{value}?insensitive=true  -> Base36 해시를 정수로 변환
"""

import json
import os
import re
import sys

# --- 공통 모듈 설정 ---
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
try:
    from common.hashid import encode, decode, sanitize
except ImportError:
    from hashid import encode, decode, sanitize

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}
_INTEGER = re.compile(r"-?[0-9]+")


def _parse_flag(raw: str) -> bool | None:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return None


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.environ.get(name, "").strip())
    except ValueError:
        return default


# --- 환경 변수 (Cold Start 시 1회 로드) ---
_INSENSITIVE_DEFAULT = _parse_flag(os.environ.get("HASHID_INSENSITIVE_DEFAULT", "true"))
if _INSENSITIVE_DEFAULT is None:
    _INSENSITIVE_DEFAULT = True
_MAX_INPUT_LENGTH = _int_env("HASHID_MAX_INPUT_LENGTH", 256)


def _response(status_code: int, body: dict) -> dict:
    return {
        "statusCode": status_code,
        "headers": {
            "Content-Type": "application/json",
            "Access-Control-Allow-Origin": "*"
        },
        "body": json.dumps(body, ensure_ascii=False),
    }


def _encode(value: str) -> dict:
    value = value.strip()
    if not _INTEGER.fullmatch(value):
        return _response(400, {"error": "value must be a base-10 integer"})
    number = int(value)
    try:
        hash_id = encode(number)
    except ValueError as e:
        return _response(400, {"error": str(e)})
    return _response(200, {"number": str(number), "hash": hash_id})


def _decode(value: str, params: dict) -> dict:
    raw_flag = params.get("insensitive")
    if raw_flag is None:
        insensitive = _INSENSITIVE_DEFAULT
    else:
        insensitive = _parse_flag(raw_flag)
        if insensitive is None:
            return _response(400, {"error": "insensitive must be true or false"})

    return _response(200, {
        "hash": value,
        "normalized": sanitize(value, insensitive),
        "number": str(decode(value, insensitive)),
    })


def handler(event, context):
    try:
        path = event.get("pathParameters") or {}
        params = event.get("queryStringParameters") or {}
        action = (path.get("action") or "").strip().lower()
        value = path.get("value") or ""

        if not value:
            return _response(400, {"error": "value is required"})
        if len(value) > _MAX_INPUT_LENGTH:
            return _response(400, {"error": f"value is longer than {_MAX_INPUT_LENGTH} characters"})

        if action == "encode":
            return _encode(value)
        if action == "decode":
            return _decode(value, params)
        return _response(400, {"error": "action must be encode or decode"})

    except Exception as e:
        print(f"Handler Error: {e}")
        return _response(500, {"error": "Internal Server Error"})
