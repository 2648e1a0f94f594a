# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/10 00:57:10
# @Author : Kariko Lin

"""
Basically a minimal INI Structure: one nameless (global) section
plus named sections, each of them an ordered, single-valued dict.

No inheritance, no `+=`, no `[#include]`. See `ini.parser` for the text side.
"""

from collections.abc import Mapping, MutableMapping
from re import compile as regex
from typing import Iterator, TypedDict
from warnings import warn

from .errors import IniInvalidArgument, IniNotFound

# leading blanks, sign, then as many ASCII digits as there are.
_INT_PREFIX = regex(r'[ \t]*([+-]?)([0-9]*)')


def parse_int(text: str) -> int:
    """Decode the decimal prefix of `text`; trailing garbage is ignored.

    A value without any digit decodes to `0`.
    """
    sign, digits = _INT_PREFIX.match(text).groups()
    # int(digits) is capped by sys.get_int_max_str_digits().
    ret = 0
    for i in digits:
        ret = ret * 10 + ord(i) - 48
    return -ret if sign == '-' else ret


def format_int(value: int) -> str:
    if isinstance(value, bool) or not isinstance(value, int):
        raise IniInvalidArgument(f'integer expected, got {value!r}')
    return '%d' % value


def _check_key(key: object) -> str:
    if not isinstance(key, str) or not key:
        raise IniInvalidArgument(f'INI keys must be non-empty str: {key!r}')
    return key


class IniSection(MutableMapping[str, str]):
    """INI 小节字典。

    维护一个小节里的全部键值对，按插入顺序排列；
    覆盖已有的键*不会*改变它的位置。

    `name`为`None`的小节即全局小节（文件头部、不属于任何`[小节]`的键值对）。
    """

    def __init__(
        self, name: str | None, /,
        pairs: Mapping[str, str] | None = None
    ) -> None:
        self._name = name
        self._data: dict[str, str] = {}
        if pairs:
            self.update(pairs)

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def is_global(self) -> bool:
        return self._name is None

    def __getitem__(self, key: str) -> str:
        if key not in self._data:
            raise IniNotFound(f'{self} has no key "{key}"')
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        _check_key(key)
        if not isinstance(value, str):
            raise IniInvalidArgument(
                f'value of "{key}" must be str, got {type(value).__name__}')
        if '\n' in value or '\r' in value:
            warn(f'{self} "{key}" holds a line break, '
                 'it would be cut when saved and read again.')
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        if key not in self._data:
            raise IniNotFound(f'{self} has no key "{key}"')
        del self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return '<global>' if self._name is None else f'[{self._name}]'

    def __repr__(self) -> str:
        return '%s { .cnt = %d }' % (self, len(self._data))

    def find(self, key: str) -> str | None:
        """Exact-match lookup, `None` on miss."""
        if not isinstance(key, str):
            return None
        return self._data.get(key)

    def to_dict(self) -> dict[str, str]:
        return self._data.copy()

    # lazy to implement auto converter. just manual.
    def getint(self, key: str, default: int = 0) -> int:
        if key not in self._data:
            return default
        return parse_int(self._data[key])

    def setint(self, key: str, value: int) -> None:
        self[key] = format_int(value)

    def getbool(self, key: str, default: bool | None = None) -> bool | None:
        if key not in self._data:
            return default
        val = self._data[key]
        return bool(val) and val[0].lower() in ('1', 'y', 't')

    def getlist(self, key: str, sep: str = ',') -> list[str]:
        if not self._data.get(key):
            return []
        return [i.strip() for i in self._data[key].split(sep)]


class IniSectionMeta(TypedDict):
    section: str | None
    pairs: dict[str, str]


class IniContext(MutableMapping[str, IniSection]):
    """INI 文件表示。支持以下形式（不含行内注释）：

        ```ini
        key = val  ; 位于文件头部，用 self.header 访问。

        [section]
        key233 = val666
        ```

    映射接口只覆盖*具名*小节；全局小节恒存在、不可删除，
    也不会出现在`keys()`里。
    """

    def __init__(self) -> None:
        # None as the global section, always the first one.
        self.__sections: dict[str | None, IniSection] = {
            None: IniSection(None)
        }

    @property
    def header(self) -> IniSection:
        """位于文件头部的，不属于任何小节的游离键值对。"""
        return self.__sections[None]

    def sections(self) -> Iterator[IniSection]:
        """All sections in stored order, global one included."""
        return iter(self.__sections.values())

    def find_section(self, name: str | None) -> IniSection | None:
        if name is not None and not isinstance(name, str):
            return None
        return self.__sections.get(name)

    def get_or_create_section(self, name: str | None) -> IniSection:
        if name is not None and not isinstance(name, str):
            raise IniInvalidArgument(f'section name must be str: {name!r}')
        if (ret := self.__sections.get(name)) is None:
            ret = self.__sections[name] = IniSection(name)
        return ret

    def find_pair(self, section: str | None, key: str) -> str | None:
        if (sect := self.find_section(section)) is None:
            return None
        return sect.find(key)

    def set_pair(self, section: str | None, key: str, value: str) -> None:
        # validate before creating the section, nothing half done on failure.
        _check_key(key)
        if not isinstance(value, str):
            raise IniInvalidArgument(
                f'value of "{key}" must be str, got {type(value).__name__}')
        self.get_or_create_section(section)[key] = value

    def remove_pair(self, section: str | None, key: str) -> None:
        _check_key(key)
        if (sect := self.find_section(section)) is None:
            raise IniNotFound(f'section "{section}" not found')
        del sect[key]

    def remove_section(self, name: str) -> None:
        if name is None:
            raise IniInvalidArgument('the global section is not removable')
        if name not in self.__sections:
            raise IniNotFound(f'section "{name}" not found')
        del self.__sections[name]

    def __getitem__(self, key: str) -> IniSection:
        if key is None or key not in self.__sections:
            raise IniNotFound(f'section "{key}" not found')
        return self.__sections[key]

    def __setitem__(
        self, key: str, value: IniSection | Mapping[str, str]
    ) -> None:
        if key is None:
            raise IniInvalidArgument('use `header` for the global section')
        pairs = (
            value.to_dict() if isinstance(value, IniSection)
            # shouldn't keep ptr to external dict.
            else dict(value)
        )
        sect = self.get_or_create_section(key)
        sect.clear()
        sect.update(pairs)

    def __delitem__(self, key: str) -> None:
        self.remove_section(key)

    def __contains__(self, key: object) -> bool:
        return key is not None and key in self.__sections

    def __len__(self) -> int:
        return len(self.__sections) - 1

    def __iter__(self) -> Iterator[str]:
        return (i for i in self.__sections if i is not None)

    def __repr__(self) -> str:
        return 'IniContext { .sections = %d, .pairs = %d }' % (
            len(self.__sections),
            sum(len(i) for i in self.__sections.values()))

    def setdefault(
        self, key: str, default: Mapping[str, str] | None = None
    ) -> IniSection:
        if key not in self:
            self[key] = default or {}
        return self[key]

    def clear(self) -> None:
        self.header.clear()
        self.__sections = {None: self.header}

    def rename(self, old: str, new: str) -> bool:
        """Rename a section, keeping its position.

        Returns:
            `True` if succeed, otherwise `False`.
            May not success if `old` is not found or `new` already exists.
        """
        if not isinstance(new, str):
            raise IniInvalidArgument(f'section name must be str: {new!r}')
        if old not in self or new in self.__sections:
            return False
        sect = self.__sections[old]
        sect._name = new
        self.__sections = {
            (new if k == old else k): v for k, v in self.__sections.items()
        }
        return True

    def update(self, other=(), /, **kwargs) -> None:
        """To merge `other` into self. Later pairs win.

        Another `IniContext` merges its header into ours as well.
        """
        if isinstance(other, IniContext):
            self.header.update(other.header)
            for decl, data in other.items():
                self.get_or_create_section(decl).update(data)
            other = ()
        for decl, data in dict(other, **kwargs).items():
            self.get_or_create_section(decl).update(data)

    def _get_meta(self, key: str | None) -> IniSectionMeta:
        """for interchange exporters."""
        return IniSectionMeta(
            section=key,
            pairs=self.__sections[key].to_dict()
        )

    def _set_meta(self, meta: IniSectionMeta) -> None:
        """for interchange importers."""
        self.get_or_create_section(meta['section']).update(meta['pairs'])
