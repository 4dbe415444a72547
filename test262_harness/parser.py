import re
from pathlib import Path
from typing import Optional, Pattern, Tuple

import yaml
from pydantic import ValidationError

from .errors import FilesystemError, MetadataMissingError, PatternCompileError, SchemaError
from .schemas import Description, Entry

YAML_OPEN = "/*---"
YAML_CLOSE = "---*/"

_EOL = r"(?:\r\n|\r|\n)"
# blank lines and // comment lines trailing the notice
_TRAILING_LINES = r"(?:[ \t]*(?://[^\r\n]*)?" + _EOL + r")*"

_LICENSE_PATTERN_SOURCE = (
    r"// Copyright(?: \(c\))? \w+ .+\. {1,2}All rights reserved\." + _EOL
    + r"(?:"
    + r"// This code is governed by the(?: BSD)? license found in the LICENSE file\."
    + r"|// See LICENSE for details\."
    + r"|// Use of this source code is governed by a BSD-style license that can be" + _EOL
    + r"// found in the LICENSE file\."
    + r"|// See LICENSE or https://github\.com/tc39/test262/blob/HEAD/LICENSE"
    + r")(?:" + _EOL + r"|\Z)"
    + _TRAILING_LINES
)


def _compile_license_pattern(source: str) -> Pattern[str]:
    try:
        return re.compile(source, re.IGNORECASE)
    except re.error as e:
        raise PatternCompileError(e) from e


LICENSE_PATTERN = _compile_license_pattern(_LICENSE_PATTERN_SOURCE)


class _MetadataLoader(yaml.SafeLoader):
    """SafeLoader that keeps numbers, booleans and dates as the text written in the file.

    Identifiers like ``es6id: 19.10`` would otherwise turn into floats and
    the locale ``no`` into False.
    """


for _tag in ("bool", "int", "float", "timestamp"):
    _MetadataLoader.add_constructor(f"tag:yaml.org,2002:{_tag}", _MetadataLoader.construct_yaml_str)


class MetadataParser:
    """Pulls the metadata block and license notice out of a test262 source file."""

    @staticmethod
    def parse_file(filepath: Path) -> Entry:
        try:
            # newline='' keeps carriage returns so source is the file verbatim
            with open(filepath, 'r', encoding='utf-8', newline='') as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FilesystemError(filepath, e) from e
        return MetadataParser.parse_text(content, filepath)

    @staticmethod
    def parse_text(content: str, path: Path) -> Entry:
        start, end = MetadataParser.find_yaml(content, path)
        yaml_text = MetadataParser.normalize_newlines(content[start:end])
        desc = MetadataParser.parse_description(yaml_text, path)
        return Entry(
            source=content,
            path=path,
            desc=desc,
            license=MetadataParser.find_license(content),
        )

    @staticmethod
    def find_yaml(content: str, path: Path) -> Tuple[int, int]:
        """Return the [start, end) range between the first open and close markers."""
        start = content.find(YAML_OPEN)
        end = content.find(YAML_CLOSE)
        if start == -1 or end == -1:
            raise MetadataMissingError(path)
        start += len(YAML_OPEN)
        if end < start:
            raise MetadataMissingError(path)
        return start, end

    @staticmethod
    def normalize_newlines(text: str) -> str:
        return text.replace("\r\n", "\n").replace("\r", "\n")

    @staticmethod
    def parse_description(yaml_text: str, path: Path) -> Description:
        try:
            data = yaml.load(yaml_text, Loader=_MetadataLoader)
        except yaml.YAMLError as e:
            raise SchemaError(path, e) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise SchemaError(path, TypeError(f"expected a mapping, got {type(data).__name__}"))

        try:
            return Description.model_validate(data)
        except ValidationError as e:
            raise SchemaError(path, e) from e

    @staticmethod
    def find_license(content: str) -> Optional[Tuple[int, int]]:
        match = LICENSE_PATTERN.search(content)
        if not match:
            return None
        return match.start(), match.end()
