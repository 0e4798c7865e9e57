# src/wareki/features/config.py
from __future__ import annotations

"""
Feature-level display names.

- 月名: 月コード 1..12 / 閏月 21..32 => "1" .. "12" / "閏1" .. "閏12"
- 十干 (jikkan): 0..9  => 甲乙丙丁戊己庚辛壬癸
- 十二支 (juunishi): 0..11 => 子丑寅卯辰巳午未申酉戌亥
- 七曜 (shichiyou): 0..6 => 日月火水木金土 (0 = 日曜)
- 干支 (kanshi): 十干と十二支の組み合わせ、60 通り

元号名は core.tables の ERAS が持つ。
"""

from typing import Dict, List

MONTH_NAME_BY_CODE: Dict[int, str] = {
    1:  "1",
    2:  "2",
    3:  "3",
    4:  "4",
    5:  "5",
    6:  "6",
    7:  "7",
    8:  "8",
    9:  "9",
    10: "10",
    11: "11",
    12: "12",
}
MONTH_NAME_BY_CODE.update({20 + m: f"閏{name}" for m, name in list(MONTH_NAME_BY_CODE.items())})

# 旧来の書き方（正月・二月…）
TRADITIONAL_MONTH_NAME_BY_MONTH_NO: Dict[int, str] = {
    1:  "正月",
    2:  "二月",
    3:  "三月",
    4:  "四月",
    5:  "五月",
    6:  "六月",
    7:  "七月",
    8:  "八月",
    9:  "九月",
    10: "十月",
    11: "十一月",
    12: "十二月",
}

JIKKAN: List[str] = ["甲", "乙", "丙", "丁", "戊", "己", "庚", "辛", "壬", "癸"]
JUUNISHI: List[str] = ["子", "丑", "寅", "卯", "辰", "巳", "午", "未", "申", "酉", "戌", "亥"]
SHICHIYOU: List[str] = ["日", "月", "火", "水", "木", "金", "土"]


def month_name_from_code(code: int) -> str:
    c = int(code)
    try:
        return MONTH_NAME_BY_CODE[c]
    except KeyError as e:
        raise ValueError(f"invalid month code: {code}") from e


def traditional_month_name(code: int) -> str:
    """24 -> 閏四月、1 -> 正月"""
    c = int(code)
    is_leap = c > 20
    m = c - 20 if is_leap else c
    try:
        base = TRADITIONAL_MONTH_NAME_BY_MONTH_NO[m]
    except KeyError as e:
        raise ValueError(f"invalid month code: {code}") from e
    return f"閏{base}" if is_leap else base


def jikkan_name(stem: int) -> str:
    s = int(stem)
    if not (0 <= s < 10):
        raise ValueError(f"jikkan out of range: {stem}")
    return JIKKAN[s]


def juunishi_name(branch: int) -> str:
    b = int(branch)
    if not (0 <= b < 12):
        raise ValueError(f"juunishi out of range: {branch}")
    return JUUNISHI[b]


def shichiyou_name(weekday: int) -> str:
    w = int(weekday)
    if not (0 <= w < 7):
        raise ValueError(f"weekday out of range: {weekday}")
    return SHICHIYOU[w]


def kanshi_index(stem: int, branch: int) -> int:
    """
    (十干, 十二支) -> 干支番号 0..59 (0 = 甲子)。
    十干と十二支の偶奇が揃わない組み合わせは存在しない。
    """
    s = int(stem)
    b = int(branch)
    if (s - b) % 2 != 0:
        raise ValueError(f"invalid kanshi combination: stem={stem} branch={branch}")
    # n ≡ s (mod 10), n ≡ b (mod 12)
    return (6 * s - 5 * b) % 60


def kanshi_name(stem: int, branch: int) -> str:
    kanshi_index(stem, branch)
    return jikkan_name(stem) + juunishi_name(branch)
