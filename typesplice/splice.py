"""Splice generated declarations into hand-written source files.

A target file is split at its marker line: everything above the marker is
copied verbatim, everything below is owned by the generator and rebuilt on
every run. The new content is written to a temporary file next to the target
and moved into place with :func:`os.replace`, so an interrupted run never
leaves a half-written target behind.
"""

from __future__ import annotations

import os
import stat
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

from .codegen.core.config import GeneratorConfig
from .codegen.core.generator import CodeGenerator
from .codegen.core.schema import TypeDefinition
from .logging_config import get_logger

logger = get_logger(__name__)

# Undecodable bytes in hand-written code round-trip unchanged.
FILE_ERRORS = "surrogateescape"


class SpliceError(Exception):
    """Raised when the target file cannot be read or rewritten."""

    pass


class MarkerNotFoundError(SpliceError):
    """Raised when the target file has no marker line."""

    def __init__(self, path: Path, marker: str) -> None:
        super().__init__(f"Unable to find marker line in {path}: {marker!r}")
        self.path = path
        self.marker = marker


@dataclass
class SpliceResult:
    """Outcome of a splice run."""

    path: Path
    content: str
    changed: bool


def read_preamble(path: Path, marker: str) -> list[str]:
    """Return the lines above the first line containing ``marker``.

    Raises:
        MarkerNotFoundError: If no line contains the marker.
        SpliceError: If the file cannot be read.
    """
    preamble: list[str] = []
    try:
        with path.open("r", encoding="utf-8", errors=FILE_ERRORS, newline="") as source:
            for line in source:
                codeline = line.rstrip("\r\n")
                if marker in codeline:
                    return preamble
                preamble.append(codeline)
    except OSError as e:
        logger.error("Cannot read %s: %s", path, e)
        raise SpliceError(f"Cannot read {path}: {e}") from e

    logger.error("Marker line missing from %s", path)
    raise MarkerNotFoundError(path, marker)


def marker_line(config: GeneratorConfig) -> str:
    return f"{config.indent}// {config.marker}"


def compose(
    preamble: Sequence[str], marker: str, blocks: Iterable[str], terminator: str
) -> str:
    """Assemble the full file text from its parts."""
    parts = [line + "\n" for line in preamble]
    parts.append(marker + "\n")
    parts.extend(blocks)
    parts.append(terminator + "\n")
    return "".join(parts)


def _write_atomically(path: Path, content: str) -> None:
    try:
        mode = stat.S_IMODE(path.stat().st_mode)
    except OSError:
        mode = None

    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent)
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8", errors=FILE_ERRORS, newline="") as tmp:
            tmp.write(content)
            tmp.flush()
            os.fsync(tmp.fileno())
        if mode is not None:
            os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except BaseException as e:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        if isinstance(e, (OSError, UnicodeError)):
            logger.error("Cannot write %s: %s", path, e)
            raise SpliceError(f"Cannot write {path}: {e}") from e
        raise


def target_path(folder: str | Path, class_name: str, generator: CodeGenerator) -> Path:
    return Path(folder) / (class_name + generator.file_extension)


def splice_file(
    path: Path,
    definitions: Sequence[TypeDefinition],
    generator: CodeGenerator,
    check: bool = False,
) -> SpliceResult:
    """Rebuild the generated section of ``path``.

    Every declaration is rendered before the file is touched, so a rendering
    failure leaves the target unchanged.

    Args:
        path: Existing file containing the marker line.
        definitions: Definitions in model order; nested ones are skipped.
        generator: Generator producing one block per top-level definition.
        check: Compute the result without writing it.

    Returns:
        The new content and whether it differs from what is on disk.
    """
    config = generator.config
    preamble = read_preamble(path, config.marker)
    logger.debug("Kept %d hand-written lines from %s", len(preamble), path)

    blocks = generator.generate_blocks(list(definitions))
    content = compose(preamble, marker_line(config), blocks, config.terminator)

    try:
        with path.open("r", encoding="utf-8", errors=FILE_ERRORS, newline="") as source:
            current = source.read()
    except OSError as e:
        raise SpliceError(f"Cannot read {path}: {e}") from e
    changed = current != content

    if check:
        logger.info("Checked %s (%s)", path, "stale" if changed else "up to date")
    elif changed:
        _write_atomically(path, content)
        logger.info("Wrote %d declarations to %s", len(blocks), path)
    else:
        logger.info("%s is already up to date", path)

    return SpliceResult(path=path, content=content, changed=changed)


def edit_file(
    definitions: Sequence[TypeDefinition],
    class_name: str,
    folder: str | Path,
    generator: CodeGenerator,
    check: bool = False,
) -> SpliceResult:
    """Splice definitions into ``folder/class_name`` plus the generator's extension."""
    return splice_file(target_path(folder, class_name, generator), definitions, generator, check)
