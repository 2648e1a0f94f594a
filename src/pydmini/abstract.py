# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/09/08 20:22:30
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from os import PathLike
from typing import Generic, TypeVar

T = TypeVar('T')


class FileHandler(Generic[T], metaclass=ABCMeta):
    def __init__(self, filename: str | PathLike[str]) -> None:
        self._fn = filename

    @abstractmethod
    def read(self, instance: T | None = None) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return str(self._fn)
