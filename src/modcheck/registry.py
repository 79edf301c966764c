"""
Lookup of algorithms by name ("iso7064-mod97-10", "luhn", "vat-gb", ...).

The default registry holds the built-in catalogue. `Registry.from_config`
adds the algorithms declared in a configuration file.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List

from .algorithms import ALL_ALGORITHMS
from .config import ModcheckConfig
from .engine.base import CheckDigit

logger = logging.getLogger(__name__)


class UnknownAlgorithmError(KeyError):
    def __init__(self, name: str, known: Iterable[str]) -> None:
        self.name = name
        super().__init__(f"Unknown algorithm {name!r}; known: {', '.join(sorted(known))}")

    def __str__(self) -> str:
        return self.args[0]


class Registry:
    """Name -> algorithm mapping; names are case-insensitive."""

    def __init__(self, algorithms: Iterable[CheckDigit] = ()) -> None:
        self._algorithms: Dict[str, CheckDigit] = {}
        for algorithm in algorithms:
            self.register(algorithm)

    def register(self, algorithm: CheckDigit) -> None:
        key = algorithm.name.lower()
        if key in self._algorithms:
            raise ValueError(f"Algorithm {algorithm.name!r} is already registered")
        self._algorithms[key] = algorithm

    def get(self, name: str) -> CheckDigit:
        try:
            return self._algorithms[name.lower()]
        except KeyError:
            raise UnknownAlgorithmError(name, self._algorithms) from None

    __getitem__ = get

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._algorithms

    def __iter__(self) -> Iterator[CheckDigit]:
        return iter(self._algorithms.values())

    def __len__(self) -> int:
        return len(self._algorithms)

    def names(self) -> List[str]:
        return list(self._algorithms)

    @classmethod
    def from_config(cls, cfg: ModcheckConfig) -> "Registry":
        registry = cls(ALL_ALGORITHMS)
        for custom in cfg.algorithms:
            if custom.name in registry:
                raise ValueError(f"Custom algorithm {custom.name!r} shadows a built-in algorithm")
            registry.register(custom.build())
            logger.debug("registered custom algorithm %s", custom.name)
        return registry


DEFAULT_REGISTRY = Registry(ALL_ALGORITHMS)


def get_algorithm(name: str) -> CheckDigit:
    """Built-in algorithm by name; raises `UnknownAlgorithmError`."""
    return DEFAULT_REGISTRY.get(name)
