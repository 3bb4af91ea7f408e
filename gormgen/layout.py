"""Where generated files go, and how they are written."""

from __future__ import annotations

import os
from collections.abc import Iterable

_FILE_MODE = 0o640
_EXCERPT_RADIUS = 5


def package_output_dir(pkg_path: str, out_path: str) -> str:
    """Directory for a generated package, ending in a path separator.

    A package path that holds a separator is taken as a path of its own and
    made absolute. Any other path is a sibling of the query output directory.
    """
    if os.sep in pkg_path:
        directory = os.path.abspath(pkg_path)
    else:
        directory = os.path.normpath(os.path.join(os.path.dirname(out_path), pkg_path))
    return directory + os.sep


def query_file_path(out_path: str, file_name: str) -> str:
    """Path of the query file generated for one model."""
    return f"{out_path}{os.sep}{file_name}.gen.go"


def query_test_file_path(out_path: str, file_name: str) -> str:
    """Path of the unit test file generated for one model's queries."""
    return f"{out_path}{os.sep}{file_name}.gen_test.go"


def query_unit_test_file(out_file: str) -> str:
    """Path of the unit test file that accompanies the main query file."""
    return out_file.removesuffix(".go") + "_test.go"


def model_file_path(model_dir: str, file_name: str) -> str:
    """Path of a generated model file inside ``model_dir``."""
    return f"{model_dir}{file_name}.gen.go"


def proto_file_path(proto_dir: str, file_name: str) -> str:
    """Path of a generated proto message file inside ``proto_dir``."""
    return f"{proto_dir}{file_name}.gen.proto"


def service_file_path(service_dir: str, file_name: str) -> str:
    """Path of a generated service file inside ``service_dir``."""
    return f"{service_dir}service_{file_name}.gen.crud.go"


def merge_import_paths(
    import_paths: Iterable[str], param_pkg_paths: Iterable[str]
) -> list[str]:
    """Join a model's imports with the packages of its method parameters.

    Each path appears once, in the order it is first met.
    """
    merged = dict.fromkeys(import_paths)
    merged.update(dict.fromkeys(param_pkg_paths))
    return list(merged)


def format_error_excerpt(content: str, error_line: int) -> list[str]:
    """Lines around ``error_line``, each prefixed with its zero-based index."""
    lines = content.split("\n")
    start = max(error_line - _EXCERPT_RADIUS, 0)
    end = min(error_line + _EXCERPT_RADIUS, len(lines) - 1)
    return [f"{i} {lines[i]}" for i in range(start, end + 1)]


def write_file(file_name: str, content: str | bytes) -> None:
    """Write ``content`` to ``file_name``, creating it with mode 0640."""
    data = content.encode("utf-8") if isinstance(content, str) else content
    fd = os.open(file_name, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, _FILE_MODE)
    with os.fdopen(fd, "wb") as fh:
        fh.write(data)