"""Path Templates: pure parsing and matching of `/segment/:param` route paths.

Invariants:
    - Parameter segments match exactly one non-empty path segment
    - Trailing slashes are ignored on both templates and request paths
    - Request paths arrive percent-encoded; captured values are decoded once
    - specificity() orders literal segments before parameters, position by position
"""

from dataclasses import dataclass
from urllib.parse import unquote


def split_path(path: str) -> tuple[str, ...]:
    """Split a URL path into non-empty segments."""
    return tuple(segment for segment in path.split("/") if segment)


@dataclass(frozen=True)
class PathTemplate:
    """Compiled route path such as `/collections/:handle/products/paginated`."""
    raw: str
    segments: tuple[str, ...]

    @classmethod
    def parse(cls, raw: str) -> "PathTemplate":
        if not raw.startswith("/"):
            raise ValueError(f"Route path must start with '/': {raw!r}")
        segments = split_path(raw)
        for segment in segments:
            if segment.startswith(":") and len(segment) == 1:
                raise ValueError(f"Unnamed path parameter in {raw!r}")
        return cls(raw=raw, segments=segments)

    @property
    def param_names(self) -> tuple[str, ...]:
        return tuple(s[1:] for s in self.segments if s.startswith(":"))

    def specificity(self) -> tuple[int, ...]:
        """Sort key: lower sorts first, literal (0) beats parameter (1)."""
        return tuple(1 if s.startswith(":") else 0 for s in self.segments)

    def match(self, segments: tuple[str, ...]) -> dict[str, str] | None:
        """Return captured params if the request segments fit this template.

        Segments are expected still percent-encoded; each is decoded exactly
        once here, after splitting, so an encoded `/` stays inside its segment.
        """
        if len(segments) != len(self.segments):
            return None
        params: dict[str, str] = {}
        for expected, actual in zip(self.segments, segments):
            if expected.startswith(":"):
                params[expected[1:]] = unquote(actual)
            elif expected != unquote(actual):
                return None
        return params

    def to_openapi(self) -> str:
        """`/products/:handle` -> `/products/{handle}`."""
        parts = [
            "{" + s[1:] + "}" if s.startswith(":") else s
            for s in self.segments
        ]
        return "/" + "/".join(parts)
