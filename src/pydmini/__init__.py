# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/11 23:31:46
# @Author : Kariko Lin

import logging

from .ini import (
    IniContext, IniSection, IniParser, IniStatus,
    IniError, IniInvalidArgument, IniIOError, IniNotFound,
    IniJsonParser, IniYamlParser
)
from .api import (
    create, destroy,
    parse_string, parse_file,
    generate_string, generate_size, generate_file,
    get_string, get_int, set_string, set_int,
    has_section, has_key, remove_section, remove_key
)

__all__ = [
    'IniContext', 'IniSection', 'IniParser', 'IniStatus',
    'IniError', 'IniInvalidArgument', 'IniIOError', 'IniNotFound',
    'IniJsonParser', 'IniYamlParser',
    'create', 'destroy',
    'parse_string', 'parse_file',
    'generate_string', 'generate_size', 'generate_file',
    'get_string', 'get_int', 'set_string', 'set_int',
    'has_section', 'has_key', 'remove_section', 'remove_key'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
