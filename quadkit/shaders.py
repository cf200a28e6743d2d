"""A small shader preprocessor that expands ``#include "name"`` directives."""

from __future__ import annotations

from dataclasses import dataclass, field

_DIRECTIVE = "#include"


@dataclass
class PreprocessorConfig:
    """Named include files available to :func:`preprocess_shader`."""

    includes: list[tuple[str, str]] = field(default_factory=list)

    def _lookup(self, filename: str) -> str:
        for name, content in self.includes:
            if name == filename:
                return content
        raise ValueError(f'Include file {filename} in not on "includes" list')


def preprocess_shader(source: str, config: PreprocessorConfig) -> str:
    """Replace every ``#include "file"`` directive with the named include's content."""
    result = source
    position = 0
    while (start := result.find(_DIRECTIVE, position)) != -1:
        cursor = start + len(_DIRECTIVE)
        while cursor < len(result) and result[cursor] == " ":
            cursor += 1
        if cursor >= len(result) or result[cursor] != '"':
            raise ValueError(f"expected '\"' after {_DIRECTIVE} at offset {start}")
        name_start = cursor + 1
        name_end = result.find('"', name_start)
        if name_end == -1:
            raise ValueError(f"unterminated include file name at offset {name_start}")
        content = config._lookup(result[name_start:name_end])
        result = result[:start] + content + result[name_end + 1 :]
        position = start + len(content)
    return result