# -*- coding: utf-8 -*-
"""
spoilerlog.parser
单遍解析 spoiler log:
- 整行等于段落标题时切换状态, 标题行本身不作为数据
- 段内按行首缩进区分 sphere / location / check
- 数据行一律按第一个冒号切分, 右侧保留后续冒号
"""
import zlib
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterable, Tuple

from spoilerlog import reader
from spoilerlog.configs import LOGGING_CFG, logger_kwargs
from spoilerlog.models import Chart, Entrance, Location, SpoilerLog
from spoilerlog.utils.logger import get_logger

logger = get_logger(**logger_kwargs(LOGGING_CFG))


class ParserState(Enum):
    HEADER = "header"
    PLAYTHROUGH = "playthrough"
    ITEM_LOCATIONS = "item_locations"
    ENTRANCES = "entrances"
    CHARTS = "charts"


SECTION_HEADERS: Dict[str, ParserState] = {
    "Playthrough:": ParserState.PLAYTHROUGH,
    "All item locations:": ParserState.ITEM_LOCATIONS,
    "Entrances:": ParserState.ENTRANCES,
    "Charts:": ParserState.CHARTS,
}
STARTING_ISLAND_PREFIX = "Starting island:"

# 生成器输出的固定缩进宽度, 不做推断
PLAYTHROUGH_CHECK_INDENT = " " * 6
PLAYTHROUGH_LOCATION_INDENT = " " * 2
ITEM_LOCATIONS_CHECK_INDENT = " " * 4


class SpoilerLogParseError(ValueError):
    """日志不符合格式且无法继续解析时抛出, 不返回部分结果"""

    def __init__(self, line_number: int, line_content: str, reason: str) -> None:
        self.line_number = line_number
        self.line_content = line_content
        self.reason = reason
        # args 保留构造参数, 以便 pickle 跨进程传递
        super().__init__(line_number, line_content, reason)

    def __str__(self) -> str:
        return f"Parse error at line {self.line_number}: {self.reason}: {self.line_content!r}"


def next_state(state: ParserState, line: str) -> ParserState:
    return SECTION_HEADERS.get(line, state)


def is_section_header(line: str) -> bool:
    return line in SECTION_HEADERS


def split_pair(line: str) -> Tuple[str, str] | None:
    """按第一个冒号切分并去掉两侧空白; 没有冒号时返回 None"""
    left, sep, right = line.partition(":")
    if not sep:
        return None
    return left.strip(), right.strip()


@dataclass
class _ParseContext:
    log: SpoilerLog
    state: ParserState = ParserState.HEADER
    loc: str = ""
    lineno: int = 0


class LogParser:
    def __init__(self):
        self._handlers: Dict[ParserState, Callable[[_ParseContext, str], None]] = {
            ParserState.HEADER: self._on_header,
            ParserState.PLAYTHROUGH: self._on_playthrough,
            ParserState.ITEM_LOCATIONS: self._on_item_locations,
            ParserState.ENTRANCES: self._on_entrances,
            ParserState.CHARTS: self._on_charts,
        }

    def parse(self, lines: Iterable[str]) -> SpoilerLog:
        """
        输入: 已去掉换行符的行序列, 只遍历一次
        输出: 完整的 SpoilerLog; 空输入得到全部为空的默认值
        """
        ctx = _ParseContext(log=SpoilerLog())
        for lineno, line in enumerate(lines, 1):
            ctx.lineno = lineno
            if is_section_header(line):
                new_state = next_state(ctx.state, line)
                logger.debug("line %d: %s -> %s", lineno, ctx.state.value, new_state.value)
                ctx.state = new_state
                continue
            if not line.strip():
                continue
            if line.startswith(STARTING_ISLAND_PREFIX):
                ctx.log.starting_island = line.split(":", 1)[1].strip()
                continue
            self._handlers[ctx.state](ctx, line)

        log = ctx.log
        logger.info(
            "parsed spoiler log: starting_island=%r spheres=%d playthrough_checks=%d locations=%d entrances=%d charts=%d",
            log.starting_island,
            len(log.playthrough),
            sum(len(s) for s in log.playthrough),
            len(log.locations),
            len(log.entrances),
            len(log.charts),
        )
        return log

    def _split(self, ctx: _ParseContext, line: str) -> Tuple[str, str]:
        pair = split_pair(line)
        if pair is None:
            raise SpoilerLogParseError(ctx.lineno, line, "missing ':' delimiter")
        return pair

    def _on_header(self, ctx: _ParseContext, line: str) -> None:
        pass

    def _on_playthrough(self, ctx: _ParseContext, line: str) -> None:
        if line.startswith(PLAYTHROUGH_CHECK_INDENT):
            if not ctx.log.playthrough:
                raise SpoilerLogParseError(ctx.lineno, line, "check line before first sphere header")
            check, item = self._split(ctx, line)
            ctx.log.playthrough[-1].append(Location(location=ctx.loc, check=check, item=item))
        elif line.startswith(PLAYTHROUGH_LOCATION_INDENT):
            # 去掉两格缩进和结尾的冒号
            ctx.loc = line[len(PLAYTHROUGH_LOCATION_INDENT):-1]
        else:
            # sphere 标签本身不保留, 每出现一次就开新的 sphere
            ctx.log.playthrough.append([])

    def _on_item_locations(self, ctx: _ParseContext, line: str) -> None:
        if line.startswith(ITEM_LOCATIONS_CHECK_INDENT):
            check, item = self._split(ctx, line)
            ctx.log.locations.append(Location(location=ctx.loc, check=check, item=item))
        else:
            ctx.loc = line[:-1].strip()

    def _on_entrances(self, ctx: _ParseContext, line: str) -> None:
        source, destination = self._split(ctx, line)
        ctx.log.entrances.append(Entrance(source=source, destination=destination))

    def _on_charts(self, ctx: _ParseContext, line: str) -> None:
        chart, location = self._split(ctx, line)
        ctx.log.charts.append(Chart(chart=chart, location=location))


def parse_lines(lines: Iterable[str]) -> SpoilerLog:
    return LogParser().parse(lines)


def parse_log(path: str, encoding: str | None = None, errors: str | None = None) -> SpoilerLog:
    """
    按路径解析; 文件打不开或读取失败 (含损坏、截断的 .gz) 时记录告警并返回空的 SpoilerLog
    格式错误 SpoilerLogParseError 照常抛出
    """
    try:
        with reader.open_log(path, encoding=encoding, errors=errors) as f:
            return LogParser().parse(reader.iter_lines(f))
    except (OSError, EOFError, zlib.error) as e:
        logger.warning("cannot read spoiler log %s: %s", path, e)
        return SpoilerLog()
