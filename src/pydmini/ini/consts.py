# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/10/10 01:15:56
# @Author : Kariko Lin

from enum import Enum


class IniStatus(int, Enum):
    OK = 0
    GENERAL_ERROR = -1
    OUT_OF_MEMORY = -2
    INVALID_ARGUMENT = -3
    NOT_FOUND = -4
    IO_ERROR = -5


# only ASCII blanks get trimmed, str.strip() would eat unicode spaces too.
WHITESPACE = ' \t\r\n'
COMMENT_MARKS = (';', '#')
