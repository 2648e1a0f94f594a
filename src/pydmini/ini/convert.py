# -*- encoding: utf-8 -*-
# @File   : convert.py
# @Time   : 2024/10/12 22:41:08
# @Author : Kariko Lin

"""JSON / YAML interchange for `IniContext`.

Both share one document layout, sections kept in order:

    ```yaml
    protocol: 1
    sections:
    - section: null     # the global section, always first.
      pairs: {key: val}
    - section: db
      pairs: {host: localhost}
    ```
"""

import json
from typing import Any, TypedDict

import yaml

from ..abstract import FileHandler
from .errors import IniInvalidArgument
from .model import IniContext, IniSectionMeta


class _IniDoc(TypedDict):
    protocol: int
    sections: list[IniSectionMeta]


class IniDocParser(FileHandler[IniContext]):
    PROTOCOL = 1

    def __init__(self, filename: str, encoding: str = 'utf-8') -> None:
        super().__init__(filename)
        self._codec = encoding

    @classmethod
    def to_doc(cls, instance: IniContext) -> _IniDoc:
        return _IniDoc(
            protocol=cls.PROTOCOL,
            sections=[instance._get_meta(i.name) for i in instance.sections()]
        )

    @staticmethod
    def from_doc(src: Any, instance: IniContext | None = None) -> IniContext:
        if not isinstance(src, dict) or not isinstance(
                src.get('sections'), list):
            raise IniInvalidArgument('not an INI interchange document.')
        if instance is None:
            instance = IniContext()
        for i in src['sections']:
            if not isinstance(i, dict):
                raise IniInvalidArgument(f'bad section record: {i!r}')
            name = i.get('section')
            if not isinstance(pairs := i.get('pairs') or {}, dict):
                raise IniInvalidArgument(f'bad pairs of section {name!r}')
            instance._set_meta(IniSectionMeta(
                section=None if name is None else str(name),
                # may there be some pure digits considered as int
                pairs={str(k): '' if v is None else str(v)
                       for k, v in pairs.items()}
            ))
        return instance


class IniJsonParser(IniDocParser):
    def read(self, instance: IniContext | None = None) -> IniContext:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            return self.from_doc(json.load(fp), instance)

    def write(self, instance: IniContext, indent: int = 2) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            json.dump(self.to_doc(instance), fp,
                      ensure_ascii=False, indent=indent)


class IniYamlParser(IniDocParser):
    def read(self, instance: IniContext | None = None) -> IniContext:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            return self.from_doc(yaml.safe_load(fp), instance)

    def write(self, instance: IniContext) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            yaml.safe_dump(self.to_doc(instance), fp,
                           allow_unicode=True, sort_keys=False)
