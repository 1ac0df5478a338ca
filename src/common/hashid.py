"""
HashID 인코딩/디코딩 (Base36)
문자集: 0-9, a-z (36자)

디코딩은 관대하게 동작함: 대소문자를 무시하고(기본값) 알파벳 외 문자는 버림.
"""

import string
from types import MappingProxyType

ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
BASE = len(ALPHABET)

# 모듈 로드 시 한 번만 생성, 이후 읽기 전용
LOOKUP = MappingProxyType({char: index for index, char in enumerate(ALPHABET)})

# ASCII 대문자만 소문자로 (유니코드 케이스 변환은 하지 않음)
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def encode(number: int) -> str:
    """정수 -> Base36 문자열"""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"number must be an int, not {type(number).__name__}")
    if number < 0:
        raise ValueError("Negative numbers are not supported")
    if number == 0:
        return ALPHABET[0]
    result = []
    while number > 0:
        number, remainder = divmod(number, BASE)
        result.append(ALPHABET[remainder])
    return "".join(reversed(result))


def sanitize(hash: str, insensitive: bool = True) -> str:
    """디코딩 전 정규화: (옵션) ASCII 소문자 변환 후 알파벳 외 문자 제거"""
    if insensitive:
        hash = hash.translate(_ASCII_LOWER)
    return "".join(char for char in hash if char in LOOKUP)


def decode(hash: str, insensitive: bool = True) -> int:
    """
    Base36 문자열 -> 정수

    insensitive=False 이면 대문자는 알파벳 외 문자로 취급되어 제거됨.
    남은 문자가 없으면 0.
    """
    result = 0
    for char in sanitize(hash, insensitive):
        result = result * BASE + LOOKUP[char]
    return result
