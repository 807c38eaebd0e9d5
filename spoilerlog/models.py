# -*- coding: utf-8 -*-
from dataclasses import dataclass, field
from typing import List


@dataclass
class Location:
    """某个 location 下的一条 check 及其物品; 同一 location 会对应多条记录"""
    location: str
    check: str
    item: str


@dataclass
class Entrance:
    source: str
    destination: str


@dataclass
class Chart:
    chart: str
    location: str


@dataclass
class SpoilerLog:
    """
    解析后的 spoiler log, 结构与原始日志基本一一对应
    - playthrough: 外层按 sphere 排列, 下标 0 即 sphere 0; 内层为该 sphere 的 check
      例: playthrough[3][6] 是 sphere 3 的第 7 条
    - locations: "All item locations" 段, 不分 sphere
    - entrances / charts: 各自段落中的映射, 保持原始顺序
    """
    starting_island: str = ""
    playthrough: List[List[Location]] = field(default_factory=list)
    locations: List[Location] = field(default_factory=list)
    entrances: List[Entrance] = field(default_factory=list)
    charts: List[Chart] = field(default_factory=list)
