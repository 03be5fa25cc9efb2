"""
Configuration for the grapheme decomposer.

The :class:`ConfigSection` class is intended to be used as a base class for configuration classes, and the
:class:`ConfigItem` descriptor is intended to be used to define each configurable option in subclasses of ConfigSection.
"""

from __future__ import annotations

import logging
import os
from collections import ChainMap
from enum import Enum
from numbers import Number
from typing import Any, Callable, Iterable, Mapping, Type, Union

import yaml

__all__ = [
    'ConfigItem', 'ConfigSection', 'DecomposerConfig', 'JamoMode', 'JamoForm', 'ConfigException',
    'InvalidConfigError', 'ConfigTypeError', 'MissingConfigItemError', 'JAMO_MODE_ENV_VAR', 'parse_bool',
]
log = logging.getLogger(__name__)

JAMO_MODE_ENV_VAR = 'HANGUL_GRAPHEMES_JAMO_MODE'

ConfigMap = Union[Mapping[str, Any], 'ConfigSection', None]

_NotSet = object()


class CaseInsensitiveEnum(Enum):
    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            value = value.lower()
            for member in cls:
                if member.value == value:
                    return member
        return None


class JamoMode(CaseInsensitiveEnum):
    """How standalone compatibility consonants (ㄱ-ㅎ) are handled"""
    DISTINCT = 'distinct'  # Emitted as JamoGrapheme results
    ARITHMETIC = 'arithmetic'  # Run through the syllable arithmetic even though they are not syllables


class JamoForm(CaseInsensitiveEnum):
    """Which unicode block decomposed jamo should be drawn from"""
    CONJOINING = 'conjoining'  # Hangul Jamo (0x1100 - 0x11FF)
    COMPATIBILITY = 'compatibility'  # Hangul Compatibility Jamo (0x3130 - 0x318F)


class ConfigItem:
    __slots__ = ('name', 'type', 'default', 'default_func')

    def __init__(self, default: Any = _NotSet, type: Callable = None, default_func: Callable[[], Any] = None):  # noqa
        self.type = type
        self.default = default
        self.default_func = default_func

    def __set_name__(self, owner: Type[ConfigSection], name: str):
        self.name = name
        owner._config_items_[name] = self

    def __get__(self, instance, owner):
        try:
            return instance.__dict__[self.name]
        except AttributeError:  # instance is None
            return self
        except KeyError as e:
            if self.default is not _NotSet:
                return self.default
            elif self.default_func is not None:
                instance.__dict__[self.name] = value = self.default_func()
                return value
            raise MissingConfigItemError(self.name) from e

    def __set__(self, instance: ConfigSection, value: Any):
        if self.type is not None:
            try:
                value = self.type(value)
            except (TypeError, ValueError) as e:
                raise ConfigTypeError(f'Invalid value={value!r} for {self.name!r}: {e}') from e
        instance.__dict__[self.name] = value

    def __delete__(self, instance: ConfigSection):
        try:
            del instance.__dict__[self.name]
        except KeyError as e:
            raise AttributeError(f'No {self.name!r} config was stored for {instance}') from e

    def __repr__(self) -> str:
        return f'<{self.__class__.__name__}({self.default!r}, type={self.type!r})>'


class ConfigMeta(type):
    """
    Metaclass for ConfigSections.  Necessary to initialize the ``_config_items_`` dict for ConfigItem registration
    because the contents of a class is evaluated before ``__init_subclass__`` is called.
    """
    _config_items_: dict[str, ConfigItem]

    @classmethod
    def __prepare__(mcs, name: str, bases: Iterable[type], **kwargs) -> dict[str, Any]:
        config_items = {}
        for base in bases:
            if isinstance(base, mcs):
                config_items.update(base._config_items_)
        return {'_config_items_': config_items}


class ConfigSection(metaclass=ConfigMeta):
    _config_items_: dict[str, ConfigItem]

    def __init__(self, config: ConfigMap = None, **kwargs):
        self.update(config, **kwargs)

    def update(self, config: ConfigMap = None, **kwargs):
        """
        Update this section with the given content.  If any of the provided keys are not expected, then an
        :class:`InvalidConfigError` will be raised before any values are changed.

        :param config: A dict or other mapping containing values that should be used in this section
        :param kwargs: Additional keyword arguments for values that should be used in this section
        """
        if isinstance(config, ConfigSection):
            config = config.__dict__
        if not (config_map := ChainMap(kwargs, config) if config and kwargs else (config or kwargs)):
            return
        if bad := set(config_map).difference(self._config_items_):
            raise InvalidConfigError(f'Invalid configuration - unsupported options: {", ".join(sorted(bad))}')
        for key, val in config_map.items():
            setattr(self, key, val)

    def __contains__(self, key: str) -> bool:
        """True if a non-default value exists for the given key"""
        return key in self.__dict__

    def __getitem__(self, key: str):
        if key not in self._config_items_:
            raise KeyError(key)
        return getattr(self, key)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ConfigSection):
            return NotImplemented
        return self.__class__ is other.__class__ and self.as_dict() == other.as_dict()

    def __repr__(self) -> str:
        settings = ', '.join(f'{k}={v!r}' for k, v in sorted(self.as_dict().items()))
        return f'<{self.__class__.__name__}({settings})>'

    def as_dict(self) -> dict[str, Any]:
        return {key: getattr(self, key) for key in self._config_items_}


def parse_bool(value: Any) -> bool:
    original = value
    if isinstance(value, bool):
        return value
    elif isinstance(value, str):
        try:
            value = yaml.safe_load(value)  # Handles 0/1/true/True/TRUE/false/False/FALSE
        except yaml.YAMLError:
            pass
    if isinstance(value, (Number, bool)):
        return bool(value)
    elif isinstance(value, str):
        value = value.lower()
        if value in ('t', 'y', 'yes'):
            return True
        elif value in ('f', 'n', 'no'):
            return False
    raise ValueError(f'Unable to parse boolean value from input: {original!r}')


def _jamo_mode_from_env() -> JamoMode:
    value = os.environ.get(JAMO_MODE_ENV_VAR) or JamoMode.DISTINCT.value
    try:
        return JamoMode(value)
    except ValueError as e:
        choices = ', '.join(m.value for m in JamoMode)
        raise InvalidConfigError(f'Invalid {JAMO_MODE_ENV_VAR}={value!r} - expected one of: {choices}') from e


class DecomposerConfig(ConfigSection):
    jamo_mode: JamoMode = ConfigItem(type=JamoMode, default_func=_jamo_mode_from_env)
    jamo_form: JamoForm = ConfigItem(JamoForm.CONJOINING, type=JamoForm)
    fill_final: bool = ConfigItem(True, type=parse_bool)


# region Exceptions


class ConfigException(Exception):
    """Base exception for config-related errors"""


class InvalidConfigError(ConfigException):
    """Raised when invalid config items are provided when initializing a ConfigSection"""


class ConfigTypeError(InvalidConfigError):
    """Raised when a config value cannot be converted to the type expected by its ConfigItem"""


class MissingConfigItemError(ConfigException):
    """Raised if a required config item is accessed when no value was provided for it"""


# endregion
