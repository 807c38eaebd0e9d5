# -*- coding: utf-8 -*-
import gzip
from typing import Iterable, Iterator, TextIO

from preprocess.sanitizers import sanitize_line
from spoilerlog.configs import READER_CFG


def open_log(path: str, encoding: str | None = None, errors: str | None = None) -> TextIO:
    """打开日志文件, .gz 透明解压; 打不开时抛出 OSError 由调用方处理"""
    encoding = encoding or READER_CFG.get("encoding", "utf-8")
    errors = errors or READER_CFG.get("errors", "ignore")
    if str(path).endswith(".gz"):
        return gzip.open(path, "rt", encoding=encoding, errors=errors)
    return open(path, "r", encoding=encoding, errors=errors)


def iter_lines(f: Iterable[str]) -> Iterator[str]:
    first = True
    for line in f:
        yield sanitize_line(line, first=first)
        first = False


def read_lines(path: str, encoding: str | None = None, errors: str | None = None) -> Iterator[str]:
    """逐行读取, 去掉换行符; 文件在迭代结束或生成器关闭时释放"""
    with open_log(path, encoding=encoding, errors=errors) as f:
        yield from iter_lines(f)
