"""Reading the go and toolchain directives of a go.mod file."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

FAILED_READ_GO_MOD_FILE = "failed to read go.mod file"

_GO_VERSION_RE = re.compile(
    r"^([1-9][0-9]*)\.(0|[1-9][0-9]*)(\.(0|[1-9][0-9]*))?([a-z]+[0-9]+)?$"
)
_TOOLCHAIN_RE = re.compile(r"^(default|go[1-9]\S*)$")
_DIRECTIVES = frozenset(
    {"module", "go", "toolchain", "require", "exclude", "replace", "retract", "godebug", "tool", "ignore"}
)
_SINGLE = frozenset({"module", "go", "toolchain"})


class GoModError(Exception):
    """A go.mod file could not be read or parsed."""


@dataclass
class GoModFile:
    """The parts of a go.mod file that select a Go SDK."""

    module: str = ""
    go: str = ""
    toolchain: str | None = None
    requires: list[tuple[str, str]] = field(default_factory=list)


def _tokens(line: str) -> list[str]:
    comment = line.find("//")
    if comment >= 0:
        line = line[:comment]
    return [token.strip('"') for token in line.split()]


def _apply(mod: GoModFile, verb: str, args: list[str], where: str, seen: set[str]) -> None:
    if verb in _SINGLE:
        if verb in seen:
            raise GoModError(f"{where}: repeated {verb} statement")
        seen.add(verb)
        if len(args) != 1:
            raise GoModError(f"{where}: usage: {verb} <value>")

    value = args[0] if args else ""
    if verb == "module":
        mod.module = value
    elif verb == "go":
        if not _GO_VERSION_RE.match(value):
            raise GoModError(f"{where}: invalid go version '{value}': must match format 1.23.0")
        mod.go = value
    elif verb == "toolchain":
        if not _TOOLCHAIN_RE.match(value):
            raise GoModError(f"{where}: invalid toolchain name '{value}'")
        mod.toolchain = value
    elif verb == "require":
        if len(args) != 2:
            raise GoModError(f"{where}: usage: require module/path v1.2.3")
        mod.requires.append((args[0], args[1]))


def _parse(text: str, file_name: str) -> GoModFile:
    mod = GoModFile()
    seen: set[str] = set()
    block: str | None = None

    for line_no, raw in enumerate(text.splitlines(), start=1):
        tokens = _tokens(raw)
        if not tokens:
            continue
        where = f"{file_name}:{line_no}"

        if block is not None:
            if tokens == [")"]:
                block = None
            else:
                _apply(mod, block, tokens, where, seen)
            continue

        verb, args = tokens[0], tokens[1:]
        if verb not in _DIRECTIVES:
            raise GoModError(f"{where}: unknown directive: {verb}")
        if args == ["("]:
            block = verb
            continue
        _apply(mod, verb, args, where, seen)

    if block is not None:
        raise GoModError(f"{file_name}: unterminated {block} block")
    return mod


def parse_go_mod(text: str) -> GoModFile:
    """Parse the contents of a go.mod file."""
    return _parse(text, "go.mod")


def read_go_mod_file(base_dir: str) -> GoModFile:
    """Read and parse the go.mod file in base_dir."""
    path = os.path.join(base_dir, "go.mod")
    try:
        rel_path = os.path.relpath(path, os.getcwd())
    except ValueError as exc:
        raise GoModError(f"{FAILED_READ_GO_MOD_FILE}: {exc}") from exc

    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        raise GoModError(f"{FAILED_READ_GO_MOD_FILE}: {exc}") from exc

    try:
        return _parse(text, rel_path)
    except GoModError as exc:
        raise GoModError(f"{FAILED_READ_GO_MOD_FILE}: {exc}") from exc