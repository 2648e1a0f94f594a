# -*- encoding: utf-8 -*-
# @File   : api.py
# @Time   : 2024/10/11 23:05:12
# @Author : Kariko Lin

"""Flat, status code flavoured access to the INI store.

Every mutating call returns an `IniStatus` instead of raising,
and every getter falls back to the caller's default on any miss,
`None` context or key included. On failure nothing gets rolled back.

    >>> ctx = create()
    >>> parse_string(ctx, '[db]\\nport = 5432\\n')
    <IniStatus.OK: 0>
    >>> get_int(ctx, 'db', 'port', 0)
    5432
"""

import logging
from functools import wraps
from os import PathLike
from typing import Callable, ParamSpec

from .ini.consts import IniStatus
from .ini.errors import IniError, IniInvalidArgument, status_of
from .ini.model import IniContext, format_int, parse_int
from .ini.parser import IniParser

__all__ = [
    'create', 'destroy',
    'parse_string', 'parse_file',
    'generate_string', 'generate_size', 'generate_file',
    'get_string', 'get_int', 'set_string', 'set_int',
    'has_section', 'has_key', 'remove_section', 'remove_key'
]

P = ParamSpec('P')


def _returns_status(func: Callable[P, None]) -> Callable[P, IniStatus]:
    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> IniStatus:
        try:
            func(*args, **kwargs)
        except (IniError, MemoryError, OSError, TypeError, ValueError) as e:
            status = status_of(e)
            logging.warning(f'{func.__name__}: {status.name}, {e}')
            return status
        return IniStatus.OK
    return wrapper


def _require(ctx: IniContext | None, **args: object) -> IniContext:
    if ctx is None:
        raise IniInvalidArgument('no INI context given.')
    for k, v in args.items():
        if v is None:
            raise IniInvalidArgument(f'`{k}` is required.')
    return ctx


def create() -> IniContext:
    """New empty context, with the global section in place."""
    return IniContext()


def destroy(ctx: IniContext | None) -> None:
    if ctx is None:
        return
    ctx.clear()


@_returns_status
def parse_string(ctx: IniContext | None, data: str | None) -> None:
    IniParser.readstring(data, _require(ctx, data=data))


@_returns_status
def parse_file(
    ctx: IniContext | None,
    filename: str | PathLike[str] | None,
    encoding: str | None = None
) -> None:
    IniParser(filename, encoding).read(_require(ctx, filename=filename))


def generate_string(ctx: IniContext | None) -> str | None:
    if ctx is None:
        return None
    return IniParser.generate(ctx)


def generate_size(ctx: IniContext | None, encoding: str | None = None) -> int:
    """Size `generate_string()` would need, negative `IniStatus` on error."""
    if ctx is None:
        return IniStatus.INVALID_ARGUMENT.value
    try:
        return IniParser.measure(ctx, encoding)
    except (LookupError, UnicodeEncodeError) as e:
        logging.warning(f'generate_size: {e}')
        return IniStatus.INVALID_ARGUMENT.value


@_returns_status
def generate_file(
    ctx: IniContext | None,
    filename: str | PathLike[str] | None,
    encoding: str = 'utf-8'
) -> None:
    IniParser(filename, encoding).write(_require(ctx, filename=filename))


def get_string(
    ctx: IniContext | None, section: str | None,
    key: str | None, default: str | None = None
) -> str | None:
    if ctx is None or key is None:
        return default
    if (value := ctx.find_pair(section, key)) is None:
        return default
    return value


def get_int(
    ctx: IniContext | None, section: str | None,
    key: str | None, default: int = 0
) -> int:
    """Decimal prefix of the value, `default` if the key is missing.

    Note: a value holding no digit at all gives 0, *not* `default`.
    """
    if (value := get_string(ctx, section, key)) is None:
        return default
    return parse_int(value)


@_returns_status
def set_string(
    ctx: IniContext | None, section: str | None,
    key: str | None, value: str | None
) -> None:
    _require(ctx, key=key, value=value).set_pair(section, key, value)


@_returns_status
def set_int(
    ctx: IniContext | None, section: str | None,
    key: str | None, value: int
) -> None:
    _require(ctx, key=key).set_pair(section, key, format_int(value))


def has_section(ctx: IniContext | None, section: str | None) -> bool:
    return ctx is not None and ctx.find_section(section) is not None


def has_key(ctx: IniContext | None, section: str | None, key: str | None) -> bool:
    if ctx is None or key is None:
        return False
    return ctx.find_pair(section, key) is not None


@_returns_status
def remove_section(ctx: IniContext | None, section: str | None) -> None:
    _require(ctx, section=section).remove_section(section)


@_returns_status
def remove_key(
    ctx: IniContext | None, section: str | None, key: str | None
) -> None:
    _require(ctx, key=key).remove_pair(section, key)
