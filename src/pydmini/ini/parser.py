# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/10 01:04:45
# @Author : Kariko Lin

"""Text side of the INI store.

Reading is tolerant: lines that make no sense (no `=`, empty key,
unclosed `[`) are skipped rather than failing the whole document.
Writing is deterministic, byte for byte, for a given `IniContext`.
"""

import logging
from io import TextIOBase
from os import PathLike
from re import compile as regex
from typing import Iterator

import chardet

from ..abstract import FileHandler
from .consts import COMMENT_MARKS, WHITESPACE
from .errors import IniInvalidArgument, IniIOError
from .model import IniContext

# `\r\n` is one break, lone `\r` or `\n` as well.
_LINE_BREAK = regex(r'\r\n|\r|\n')


class IniParser(FileHandler[IniContext]):
    MIN_CONFIDENCE = 0.8
    # decodes any byte sequence, the last resort.
    FALLBACK_ENCODING = 'latin-1'

    def __init__(
        self, filename: str | PathLike[str], encoding: str | None = None
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    @staticmethod
    def readstring(data: str, ins: IniContext | None = None) -> IniContext:
        """读取解码好的字符串，写入`ins`（缺省则新建一个）。

        出错时*不会*回滚，`ins`里保留已经读进去的部分。
        """
        if not isinstance(data, str):
            raise IniInvalidArgument(
                f'INI text must be str, got {type(data).__name__}')
        if ins is None:
            ins = IniContext()
        this_sect = ins.header
        for lineno, line in enumerate(_LINE_BREAK.split(data), 1):
            i = line.strip(WHITESPACE)
            if not i or i[0] in COMMENT_MARKS:
                continue
            if i[0] == '[':
                if (end := i.find(']')) < 0:
                    logging.debug(f'line {lineno}: unclosed section, skipped.')
                    continue
                this_sect = ins.get_or_create_section(
                    i[1:end].strip(WHITESPACE))
            elif (eq := i.find('=')) >= 0:
                key = i[:eq].strip(WHITESPACE)
                if not key:
                    logging.debug(f'line {lineno}: empty key, skipped.')
                    continue
                this_sect[key] = i[eq + 1:].strip(WHITESPACE)
            else:
                logging.debug(f'line {lineno}: not a key=value pair, skipped.')
        return ins

    @staticmethod
    def readstream(buf: TextIOBase, ins: IniContext | None = None) -> IniContext:
        """读取解码好的字符串流。

        如没有特殊需求，直接调用`self.read()`便是。
        """
        return IniParser.readstring(buf.read(), ins)

    def _decode(self, raw: bytes) -> str:
        if self._codec is not None:
            return raw.decode(self._codec)

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < self.MIN_CONFIDENCE:
            codec = {'encoding': 'utf-8'}

        # fallbacks
        try:
            return raw.decode(codec['encoding'])
        except UnicodeDecodeError:
            logging.warning(
                f'{self._fn} is not {codec["encoding"]}, '
                f'decoded as {self.FALLBACK_ENCODING} instead.')
            return raw.decode(self.FALLBACK_ENCODING)

    def read(self, instance: IniContext | None = None) -> IniContext:
        """读取`IniParser`实例指定的文件，合并进`instance`（缺省则新建）。

        编码未指定时交给`chardet`猜。
        """
        try:
            with open(self._fn, 'rb') as fp:
                raw = fp.read()
            buf = self._decode(raw)
        except (OSError, UnicodeDecodeError, LookupError) as e:
            raise IniIOError(f'unable to read {self._fn}: {e}') from e
        return self.readstring(buf, instance)

    @staticmethod
    def _chunks(instance: IniContext) -> Iterator[str]:
        sections = list(instance.sections())
        for idx, sect in enumerate(sections):
            if not sect.is_global:
                yield f'[{sect.name}]\n'
            for k, v in sect.items():
                yield f'{k}={v}\n'
            if not sect.is_global and idx + 1 < len(sections):
                yield '\n'

    @classmethod
    def measure(cls, instance: IniContext, encoding: str | None = None) -> int:
        """Length of `generate(instance)` without building it.

        In characters, or in bytes once `encoding` is given.
        """
        if encoding is None:
            return sum(len(i) for i in cls._chunks(instance))
        return sum(len(i.encode(encoding)) for i in cls._chunks(instance))

    @classmethod
    def generate(cls, instance: IniContext) -> str:
        return ''.join(cls._chunks(instance))

    def write(self, instance: IniContext) -> None:
        """保存到*一个* INI 文件。编码未指定时使用 utf-8。"""
        try:
            data = self.generate(instance).encode(self._codec or 'utf-8')
        except (UnicodeEncodeError, LookupError) as e:
            raise IniIOError(f'unable to encode {self._fn}: {e}') from e
        try:
            # unbuffered binary: the count is what the OS took.
            with open(self._fn, 'wb', buffering=0) as fp:
                written = fp.write(data)
        except OSError as e:
            raise IniIOError(f'unable to write {self._fn}: {e}') from e
        if written != len(data):
            raise IniIOError(
                f'short write on {self._fn}: {written} of {len(data)}')

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"
