"""Example programs shipped with the package."""

from __future__ import annotations

from importlib import resources
from typing import List


def available() -> List[str]:
    names = [
        entry.name[:-2]
        for entry in resources.files(__name__).iterdir()
        if entry.name.endswith(".b")
    ]
    return sorted(names)


def load(name: str) -> str:
    if name not in available():
        raise KeyError(f"no bundled program named {name!r}")
    return resources.files(__name__).joinpath(f"{name}.b").read_text(encoding="latin-1")
