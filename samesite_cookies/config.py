from __future__ import annotations

import dataclasses
import os
import pathlib
import typing
from starlette.config import Config, Environ

from samesite_cookies.cache import NullVerdictCache
from samesite_cookies.compatibility import CompatibilityClassifier, default_classifier
from samesite_cookies.emitters import CookieSetter, Mode
from samesite_cookies.errors import ConfigurationError

__all__ = ["ENV_PREFIX", "Settings", "create_cookie_setter"]

ENV_PREFIX = "SAMESITE_"


@dataclasses.dataclass(frozen=True)
class Settings:
    mode: Mode = Mode.AUTO
    cache_verdicts: bool = True

    @classmethod
    def from_config(cls, config: Config) -> Settings:
        try:
            return cls(
                mode=config("COOKIE_MODE", cast=Mode, default=Mode.AUTO),
                cache_verdicts=config("CACHE_VERDICTS", cast=bool, default=True),
            )
        except ValueError as ex:
            raise ConfigurationError(str(ex)) from ex

    @classmethod
    def from_environ(
        cls,
        env_files: typing.Iterable[str | pathlib.Path] = (),
        environ: typing.Mapping[str, str] | None = None,
    ) -> Settings:
        """Read SAMESITE_* variables. Process environment wins over env files, later files win over earlier."""
        config = Config(environ=environ if environ is not None else Environ(), env_prefix=ENV_PREFIX)
        for env_file in env_files:
            if os.path.isfile(env_file):
                config.file_values.update(Config(env_file).file_values)
        return cls.from_config(config)


def create_cookie_setter(settings: Settings) -> CookieSetter:
    classifier = default_classifier if settings.cache_verdicts else CompatibilityClassifier(NullVerdictCache())
    return CookieSetter.for_mode(settings.mode, classifier)
