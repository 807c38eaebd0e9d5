# -*- coding: utf-8 -*-
"""
preprocess.sanitizers
读取 spoiler log 时的基础清洗：
- 去除行尾换行与 Windows 的 \r
- 去除文件开头的 UTF-8 BOM
缩进属于格式本身, 行首空白一律保留
"""

BOM = "\ufeff"

def sanitize_line(raw: str, first: bool = False) -> str:
    if not raw:
        return raw
    s = raw.rstrip("\n")
    if s.endswith("\r"):
        s = s[:-1]
    if first and s.startswith(BOM):
        s = s[len(BOM):]
    return s
