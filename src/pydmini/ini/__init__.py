# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/10 01:16:53
# @Author : Kariko Lin

from .consts import IniStatus
from .errors import IniError, IniInvalidArgument, IniIOError, IniNotFound
from .model import IniContext, IniSection, IniSectionMeta
from .parser import IniParser
from .convert import IniJsonParser, IniYamlParser
