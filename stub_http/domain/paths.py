from __future__ import annotations

from dataclasses import dataclass

from slugify import slugify

__all__ = [
    "DEFAULT_EXTENSION",
    "ResolvedPath",
    "resolve",
    "resolve_path",
]

DEFAULT_EXTENSION = "json"

# python-slugify drops apostrophes and commas between digits; treat them
# like any other non-alphanumeric run.
_SEPARATOR_REPLACEMENTS = [[",", "-"], ["'", "-"]]


@dataclass(frozen=True)
class ResolvedPath:
    """Location of the fixture file answering one URL path."""

    directory: str
    slug: str
    extension: str

    def __str__(self) -> str:
        return f"{self.directory}/{self.slug}.{self.extension}"


def _split(url_path: str) -> tuple[str, str, str]:
    dirname, _, basename = url_path.rpartition("/")
    filename, dot, extension = basename.rpartition(".")
    if not dot:
        filename, extension = basename, ""
    return dirname, filename, extension


def resolve_path(url_path: str, base_directory: str) -> ResolvedPath:
    """Map a URL path onto a fixture file under `base_directory`.

    Rules:
    - The directory part (everything before the last "/") and the file name
      (without extension) are joined with a single "-", so "/a/b/c" becomes
      "/a/b-c" before slugifying. A path without "/" yields a leading "-".
    - The token is slugified: lowercase ASCII, every non-alphanumeric run
      collapsed to one "-", leading and trailing dashes stripped.
    - The URL extension is kept verbatim; without one it defaults to "json".

    Never raises: "/" resolves to "<base>/.json".
    """
    dirname, filename, extension = _split(url_path)
    return ResolvedPath(
        directory=base_directory,
        slug=slugify(f"{dirname}-{filename}", replacements=_SEPARATOR_REPLACEMENTS),
        extension=extension or DEFAULT_EXTENSION,
    )


def resolve(url_path: str, base_directory: str) -> str:
    """Return the fixture filename for `url_path` as a plain string."""
    return str(resolve_path(url_path, base_directory))
