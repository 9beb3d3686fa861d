"""Engine settings: a name/value store with typed, derived options."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from os import PathLike
from typing import Union


class ConfigError(Exception):
    """Raised for unknown variables, malformed values or bad settings files."""


class Variant(enum.Enum):
    """Supported draughts variants."""

    INTERNATIONAL = "international"
    BRAZILIAN = "brazilian"

    @property
    def board_size(self) -> int:
        return 10 if self is Variant.INTERNATIONAL else 8

    @property
    def pip_max(self) -> int:
        return 300 if self is Variant.INTERNATIONAL else 200


_DEFAULTS = {
    "book": "false",
    "book-margin": "2",
    "ponder": "false",
    "threads": "1",
    "tt-size": "24",
    "bb-size": "6",
    "dxp-server": "true",
    "dxp-host": "127.0.0.1",
    "dxp-port": "27531",
    "dxp-initiator": "false",
    "dxp-time": "5",
    "dxp-moves": "75",
    "dxp-board": "false",
    "dxp-search": "false",
    "variant": "international",
}


@dataclass(frozen=True)
class Options:
    """Typed view of the settings, derived by Config.update()."""

    book: bool
    book_margin: int
    ponder: bool
    smp: bool
    smp_threads: int
    trans_size: int
    bb: bool
    bb_size: int
    variant: Variant
    dxp_server: bool
    dxp_host: str
    dxp_port: int
    dxp_initiator: bool
    dxp_time: int
    dxp_moves: int
    dxp_board: bool
    dxp_search: bool


class Config:
    """A store of named string settings with the engine defaults."""

    def __init__(self) -> None:
        self._values: dict[str, str] = dict(_DEFAULTS)
        self.options = self.update()

    def set(self, name: str, value: str) -> None:
        self._values[name] = value

    def get(self, name: str) -> str:
        try:
            return self._values[name]
        except KeyError:
            raise ConfigError(f'unknown variable: "{name}"') from None

    def get_bool(self, name: str) -> bool:
        value = self.get(name)
        if value == "true":
            return True
        if value == "false":
            return False
        raise ConfigError(f'not a boolean: variable {name} = "{value}"')

    def get_int(self, name: str) -> int:
        value = self.get(name)
        try:
            return int(value)
        except ValueError:
            raise ConfigError(f'not an integer: variable {name} = "{value}"') from None

    def get_float(self, name: str) -> float:
        value = self.get(name)
        try:
            return float(value)
        except ValueError:
            raise ConfigError(f'not a number: variable {name} = "{value}"') from None

    def load(self, path: Union[str, PathLike]) -> None:
        """Read "name = value" triples separated by whitespace."""
        try:
            with open(path, encoding="utf-8") as f:
                tokens = f.read().split()
        except OSError:
            raise ConfigError(f'unable to open file "{path}"') from None

        if len(tokens) % 3 != 0:
            raise ConfigError("invalid INI file")
        for name, sep, value in zip(tokens[0::3], tokens[1::3], tokens[2::3]):
            if sep != "=":
                raise ConfigError("invalid INI file")
            self.set(name, value)

    def update(self) -> Options:
        """Recompute the typed options from the current settings."""
        threads = self.get_int("threads")
        bb_size = self.get_int("bb-size")
        variant_name = self.get("variant")
        try:
            variant = Variant(variant_name)
        except ValueError:
            raise ConfigError(f"unknown variant: {variant_name}") from None

        self.options = Options(
            book=self.get_bool("book"),
            book_margin=self.get_int("book-margin"),
            ponder=self.get_bool("ponder"),
            smp=threads > 1,
            smp_threads=threads,
            trans_size=1 << self.get_int("tt-size"),
            bb=bb_size > 0,
            bb_size=bb_size,
            variant=variant,
            dxp_server=self.get_bool("dxp-server"),
            dxp_host=self.get("dxp-host"),
            dxp_port=self.get_int("dxp-port"),
            dxp_initiator=self.get_bool("dxp-initiator"),
            dxp_time=self.get_int("dxp-time"),
            dxp_moves=self.get_int("dxp-moves"),
            dxp_board=self.get_bool("dxp-board"),
            dxp_search=self.get_bool("dxp-search"),
        )
        return self.options