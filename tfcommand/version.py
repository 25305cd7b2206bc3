"""Terraform versions: parsing, comparison and compatibility checks."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from functools import total_ordering
from itertools import zip_longest

from tfcommand.command import Command

_INT64_MAX = 2**63 - 1

_VERSION_RE = re.compile(
    r"v?(?P<segments>[0-9]+(?:\.[0-9]+)*?)"
    r"(?:-(?P<pre>[0-9]+[0-9A-Za-z\-~]*(?:\.[0-9A-Za-z\-~]+)*)"
    r"|(?:-?(?P<pre_alt>[A-Za-z\-~]+[0-9A-Za-z\-~]*(?:\.[0-9A-Za-z\-~]+)*)))?"
    r"(?:\+(?P<meta>[0-9A-Za-z\-~]+(?:\.[0-9A-Za-z\-~]+)*))??"
)

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _parse_int64(text: str) -> int | None:
    if not _INT_RE.fullmatch(text):
        return None
    value = int(text)
    if not -_INT64_MAX - 1 <= value <= _INT64_MAX:
        return None
    return value


def _compare_part(left: str, right: str) -> int:
    if left == right:
        return 0
    left_num = _parse_int64(left)
    right_num = _parse_int64(right)
    if left == "":
        return -1 if right_num is not None else 1
    if right == "":
        return 1 if left_num is not None else -1
    if left_num is not None and right_num is None:
        return -1
    if left_num is None and right_num is not None:
        return 1
    if left_num is None:
        return 1 if left > right else -1
    return 1 if left_num > right_num else -1


def _compare_prereleases(left: str, right: str) -> int:
    if left == right:
        return 0
    for lpart, rpart in zip_longest(left.split("."), right.split("."), fillvalue=""):
        result = _compare_part(lpart, rpart)
        if result:
            return result
    return 0


@total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    """A version number with optional prerelease and build metadata."""

    segments: tuple[int, ...]
    prerelease: str = ""
    metadata: str = ""

    def __post_init__(self) -> None:
        segments = tuple(int(s) for s in self.segments)
        segments += (0,) * (3 - len(segments))
        object.__setattr__(self, "segments", segments)

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse a version string such as "v0.13.0-beta3+build"."""
        match = _VERSION_RE.fullmatch(text)
        if match is None:
            raise ValueError(f"Malformed version: {text}")
        segments = []
        for part in match.group("segments").split("."):
            value = int(part)
            if value > _INT64_MAX:
                raise ValueError(f"Error parsing version: value out of range: {part}")
            segments.append(value)
        prerelease = match.group("pre_alt") or match.group("pre") or ""
        return cls(tuple(segments), prerelease, match.group("meta") or "")

    def core(self) -> Version:
        """This version without prerelease and metadata."""
        return Version(self.segments)

    def _compare(self, other: Version) -> int:
        if str(self) == str(other):
            return 0
        if self.segments == other.segments:
            if not self.prerelease and not other.prerelease:
                return 0
            if not self.prerelease:
                return 1
            if not other.prerelease:
                return -1
            return _compare_prereleases(self.prerelease, other.prerelease)
        for lhs, rhs in zip_longest(self.segments, other.segments, fillvalue=0):
            if lhs != rhs:
                return -1 if lhs < rhs else 1
        return 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) < 0

    def __hash__(self) -> int:
        segments = list(self.segments)
        while segments and segments[-1] == 0:
            segments.pop()
        return hash(tuple(segments))

    def __str__(self) -> str:
        text = ".".join(str(s) for s in self.segments)
        if self.prerelease:
            text += f"-{self.prerelease}"
        if self.metadata:
            text += f"+{self.metadata}"
        return text


V0_4_1 = Version.parse("0.4.1")
V0_5_0 = Version.parse("0.5.0")
V0_6_13 = Version.parse("0.6.13")
V0_7_7 = Version.parse("0.7.7")
V0_8_0 = Version.parse("0.8.0")
V0_10_0 = Version.parse("0.10.0")
V0_12_0 = Version.parse("0.12.0")
V0_13_0 = Version.parse("0.13.0")
V0_14_0 = Version.parse("0.14.0")
V0_15_0 = Version.parse("0.15.0")
V0_15_2 = Version.parse("0.15.2")
V0_15_3 = Version.parse("0.15.3")
V1_1_0 = Version.parse("1.1.0")
V1_4_0 = Version.parse("1.4.0")


class VersionMismatchError(Exception):
    """The Terraform version is outside the range a feature supports."""

    def __init__(self, min_inclusive: str, max_exclusive: str, actual: str) -> None:
        self.min_inclusive = min_inclusive
        self.max_exclusive = max_exclusive
        self.actual = actual
        super().__init__(
            f"unexpected version {actual} (min: {min_inclusive}, max: {max_exclusive})"
        )


def version_command(json_output: bool) -> Command:
    """The `terraform version` command, with or without -json."""
    return Command(["version", "-json"] if json_output else ["version"])


def _parse_version_text(text: str, what: str) -> Version:
    try:
        return Version.parse(text)
    except ValueError as exc:
        raise ValueError(f'unable to parse {what}"{text}": {exc}') from exc


def parse_json_version_output(
    stdout: str | bytes,
) -> tuple[Version, dict[str, Version]]:
    """Parse `terraform version -json` output.

    Malformed JSON raises json.JSONDecodeError, which callers may take as a
    sign to fall back to the plain-text output.
    """
    data = json.loads(stdout)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("version output is not a JSON object")
    version_text = data.get("terraform_version") or ""
    if not isinstance(version_text, str):
        raise ValueError("terraform_version is not a string")
    tf_version = _parse_version_text(version_text, "version ")
    selections = data.get("provider_selections") or {}
    if not isinstance(selections, dict):
        raise ValueError("provider_selections is not a JSON object")
    providers = {}
    for provider, text in selections.items():
        if not isinstance(text, str):
            raise ValueError(f"version of {provider} is not a string")
        providers[provider] = _parse_version_text(text, f'"{provider}" version ')
    return tf_version, providers


_SIMPLE_VERSION_RE = r"v?(?P<version>[0-9]+(?:\.[0-9]+)*(?:-[A-Za-z0-9\.]+)?)"
_VERSION_OUTPUT_RE = re.compile(r"Terraform " + _SIMPLE_VERSION_RE)
_PROVIDER_VERSION_OUTPUT_RE = re.compile(
    r"(\n\+ provider[\. ](?P<name>\S+) " + _SIMPLE_VERSION_RE + r")"
)


def parse_plaintext_version_output(stdout: str) -> tuple[Version, dict[str, Version]]:
    """Parse the plain-text output of `terraform version`."""
    stdout = stdout.strip()
    match = _VERSION_OUTPUT_RE.search(stdout)
    if match is None:
        raise ValueError(f"unexpected number of version matches 0 for {stdout}")
    tf_version = _parse_version_text(match.group("version"), "version ")
    providers = {
        m.group("name"): _parse_version_text(m.group("version"), "provider version ")
        for m in _PROVIDER_VERSION_OUTPUT_RE.finditer(stdout)
    }
    return tf_version, providers


def version_in_range(
    version: Version,
    min_inclusive: Version | None,
    max_exclusive: Version | None,
) -> bool:
    """Whether min_inclusive <= version < max_exclusive, ignoring prereleases."""
    if min_inclusive is None and max_exclusive is None:
        return True
    core = version.core()
    if min_inclusive is not None and core < min_inclusive.core():
        return False
    if max_exclusive is not None and not core < max_exclusive.core():
        return False
    return True


def _error_version_string(version: Version | None) -> str:
    return "-" if version is None else str(version)


def require_version(
    version: Version,
    min_inclusive: Version | None,
    max_exclusive: Version | None,
) -> None:
    """Raise VersionMismatchError unless the version lies in the given range."""
    if not version_in_range(version, min_inclusive, max_exclusive):
        raise VersionMismatchError(
            _error_version_string(min_inclusive),
            _error_version_string(max_exclusive),
            _error_version_string(version),
        )