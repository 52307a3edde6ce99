"""Evaluation context holding bound variables."""

from __future__ import annotations

from typing import Any, Iterator, Mapping

from pydantic import BaseModel


class Context:
    """Variables available to conditions and actions during evaluation.

    Example:
        ctx = Context({"age": 21}, country="NL")
        ctx["age"]        # 21
        ctx.values()      # {"age": 21, "country": "NL"}
    """

    def __init__(self, values: Mapping[str, Any] | None = None, **kwargs: Any):
        self._values: dict[str, Any] = dict(values or {})
        self._values.update(kwargs)

    @classmethod
    def from_mapping(cls, source: Mapping[str, Any] | BaseModel) -> Context:
        """Build a context from a mapping or a pydantic model's set fields."""
        if isinstance(source, BaseModel):
            return cls(source.model_dump(exclude_none=True))
        return cls(source)

    def __getitem__(self, name: str) -> Any:
        try:
            return self._values[name]
        except KeyError:
            raise KeyError(f"Context variable not bound: {name}") from None

    def __setitem__(self, name: str, value: Any) -> None:
        self._values[name] = value

    def __delitem__(self, name: str) -> None:
        try:
            del self._values[name]
        except KeyError:
            raise KeyError(f"Context variable not bound: {name}") from None

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._values))

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Context({self._values!r})"

    def get(self, name: str, default: Any = None) -> Any:
        return self._values.get(name, default)

    def keys(self) -> list[str]:
        return list(self._values)

    def values(self) -> dict[str, Any]:
        """Snapshot of the bound variables; changes to it do not reach the context."""
        return dict(self._values)
