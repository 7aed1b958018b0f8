"""Executes copy rules against the filesystem."""

import fnmatch
import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from loguru import logger

from ..common.errors import CopyRuleError
from ..common.schemas import CopyRule
from ..utils.profiling import timed

_BRACES = re.compile(r"\{([^{}]*)\}")
_MAGIC = re.compile(r"[*?\[]")


def expand_braces(pattern: str) -> list[str]:
    """Expand ``{a,b}`` alternatives into separate patterns."""
    match = _BRACES.search(pattern)
    if match is None:
        return [pattern]

    head, tail = pattern[: match.start()], pattern[match.end() :]
    expanded: list[str] = []
    for option in match.group(1).split(","):
        expanded.extend(expand_braces(head + option + tail))
    return expanded


def split_glob(pattern: str) -> tuple[Path, str]:
    """Split a glob into its literal root directory and the magic remainder."""
    parts = pattern.split("/")
    for index, part in enumerate(parts):
        if _MAGIC.search(part):
            root = "/".join(parts[:index]) or "/"
            return Path(root), "/".join(parts[index:])
    return Path(pattern).parent, Path(pattern).name


def is_ignored(path: Path, context: Path, ignore: Iterable[str]) -> bool:
    """Match ``ignore`` globs against ``path`` relative to ``context``, rooted at ``/``."""
    if path.is_relative_to(context):
        posix = "/" + path.relative_to(context).as_posix()
    else:
        posix = path.as_posix()
    return any(fnmatch.fnmatchcase(posix, pattern) for pattern in ignore)


def iter_sources(rule: CopyRule) -> Iterator[Path]:
    """Yield the files a rule applies to, sorted, without ignored ones."""
    matches: set[Path] = set()
    for pattern in expand_braces(rule.from_glob):
        root, remainder = split_glob(pattern)
        if not root.is_dir():
            continue
        matches.update(p for p in root.glob(remainder) if p.is_file())

    context = rule.context.resolve()
    for path in sorted(matches):
        if not is_ignored(path, context, rule.ignore):
            yield path


def render_destination(template: str, source: Path, context: Path) -> Path:
    """Fill the ``[path]``, ``[name]`` and ``[ext]`` tokens of a destination template."""
    relative_dir = source.parent.relative_to(context).as_posix()
    rel_path = "" if relative_dir == "." else f"{relative_dir}/"

    return Path(
        template.replace("[path]", rel_path)
        .replace("[name]", source.stem)
        .replace("[ext]", source.suffix)
    )


def apply_rule(rule: CopyRule) -> list[Path]:
    """Apply one copy rule. Returns the written files."""
    written: list[Path] = []
    context = rule.context.resolve()

    for source in iter_sources(rule):
        destination = render_destination(rule.to, source, context)
        try:
            content = rule.transform(source.read_bytes())
        except Exception as exc:
            raise CopyRuleError(str(source), rule.width, str(exc)) from exc

        destination.parent.mkdir(parents=True, exist_ok=True)
        _ = destination.write_bytes(content)
        logger.debug(f"{source} -> {destination}")
        written.append(destination)

    return written


@timed
def apply_copy_rules(rules: Iterable[CopyRule]) -> list[Path]:
    """
    Apply copy rules in order.

    Args:
        rules: Rules as produced by generate_patterns()

    Returns:
        Written destination paths, in processing order

    Raises:
        CopyRuleError: If a source file cannot be read or transformed
    """
    written: list[Path] = []
    for rule in rules:
        outputs = apply_rule(rule)
        logger.info(f"width {rule.width}: wrote {len(outputs)} file(s)")
        written.extend(outputs)
    return written
