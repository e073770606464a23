#!/usr/bin/env python3
"""
Linquad config module.

This module holds the global display settings of the package.
"""

from __future__ import annotations

from typing import Any


class OptionSettings:
    def __init__(self, **kwargs: Any) -> None:
        self._defaults = kwargs
        self._current_values = kwargs.copy()

    def __call__(self, **kwargs: Any) -> None:
        self.set_value(**kwargs)

    def __getitem__(self, key: str) -> Any:
        return self.get_value(key)

    def __setitem__(self, key: str, value: Any) -> None:
        return self.set_value(**{key: value})

    def set_value(self, **kwargs: Any) -> None:
        for k, v in kwargs.items():
            if k not in self._defaults:
                raise KeyError(f"{k} is not a valid setting.")
            self._current_values[k] = v

    def get_value(self, name: str) -> Any:
        if name not in self._defaults:
            raise KeyError(f"{name} is not a valid setting.")
        return self._current_values[name]

    def reset(self) -> None:
        self._current_values = self._defaults.copy()

    def __enter__(self) -> OptionSettings:
        return self

    def __exit__(self, exc_type: None, exc_val: None, exc_tb: None) -> None:
        self.reset()

    def __repr__(self) -> str:
        settings = "\n ".join(
            f"{name}={value}" for name, value in self._current_values.items()
        )
        return f"OptionSettings:\n {settings}"


# display_max_terms: number of terms printed before an expression is truncated
# display_precision: significant digits of printed coefficients
options = OptionSettings(display_max_terms=6, display_precision=4)
