# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/10/10 01:21:37
# @Author : Kariko Lin

from .consts import IniStatus


class IniError(Exception):
    """Base of every INI store failure. `status` is what the flat API returns."""
    status = IniStatus.GENERAL_ERROR


class IniInvalidArgument(IniError, ValueError):
    status = IniStatus.INVALID_ARGUMENT


# KeyError so that mapping style callers (`del ctx['x']`) keep working.
class IniNotFound(IniError, KeyError):
    status = IniStatus.NOT_FOUND

    def __str__(self) -> str:
        return Exception.__str__(self)


class IniIOError(IniError, OSError):
    status = IniStatus.IO_ERROR


def status_of(err: BaseException) -> IniStatus:
    """Map an exception raised by the store onto the status taxonomy."""
    if isinstance(err, IniError):
        return err.status
    if isinstance(err, MemoryError):
        return IniStatus.OUT_OF_MEMORY
    if isinstance(err, (OSError, UnicodeDecodeError)):
        return IniStatus.IO_ERROR
    if isinstance(err, (TypeError, ValueError)):
        return IniStatus.INVALID_ARGUMENT
    return IniStatus.GENERAL_ERROR
