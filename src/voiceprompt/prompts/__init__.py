"""Instruction templates for the hosted model.

Each template is a ``<name>.txt`` file in this package. A file of the same
name in ``./prompts/`` under the working directory replaces the packaged
one, so instructions can be tuned without reinstalling.

Templates contain literal JSON examples, so placeholders are filled with
``render_prompt`` rather than ``str.format``: only ``{name}`` tokens whose
name is passed in are substituted and every other brace is left alone.
"""

import re
from functools import lru_cache
from pathlib import Path

PACKAGE_DIR = Path(__file__).parent
OVERRIDE_DIR = Path("prompts")

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


def _candidates(name: str) -> list[Path]:
    filename = f"{name}.txt"
    return [Path.cwd() / OVERRIDE_DIR / filename, PACKAGE_DIR / filename]


@lru_cache(maxsize=16)
def load_prompt(name: str) -> str:
    """Return the raw text of an instruction template.

    Raises:
        FileNotFoundError: If neither the override nor the packaged file exists
    """
    candidates = _candidates(name)
    for path in candidates:
        if path.is_file():
            return path.read_text(encoding="utf-8")

    searched = ", ".join(str(path) for path in candidates)
    raise FileNotFoundError(f"No instruction template '{name}' (searched {searched})")


def render_prompt(name: str, **values: str) -> str:
    """Load a template and fill the ``{placeholder}`` tokens named in values.

    Unknown tokens such as ``{"response": ...}`` in a JSON example are kept
    verbatim.
    """
    def fill(match: re.Match[str]) -> str:
        return values.get(match.group(1), match.group(0))

    return _PLACEHOLDER.sub(fill, load_prompt(name))


def clear_cache() -> None:
    """Forget loaded templates so edited override files are read again."""
    load_prompt.cache_clear()


__all__ = [
    "load_prompt",
    "render_prompt",
    "clear_cache",
]
