"""Translation file loading interface and implementations.

Defines the contract for reading and writing translation files and provides
JSON, INI and YAML adapters.
"""

import configparser
import io
import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Mapping, Union

import yaml

from intl.core.logging import get_module_logger
from intl.i18n.exceptions import InvalidContents, InvalidFile, InvalidFormat
from intl.i18n.flatten import flatten

logger = get_module_logger()

PathLike = Union[str, Path]


class TranslationLoader(ABC):
    """Abstract base for translation file adapters.

    Implementations decode a file into a nested string-keyed mapping and
    encode such a mapping back to UTF-8 text.
    """

    #: Format tag the adapter is registered under.
    format: str = ""

    #: File extensions (without dot) used when discovering files.
    extensions: tuple = ()

    @abstractmethod
    def decode(self, text: str) -> Any:
        """Decode file contents.

        Args:
            text: File contents.

        Returns:
            The decoded structure (validated as a mapping by `load`).

        Raises:
            InvalidContents: If the text cannot be decoded.
        """
        pass

    @abstractmethod
    def encode(self, data: Mapping[str, Any]) -> str:
        """Encode a mapping to human-readable text, unicode unescaped."""
        pass

    def load(self, location: PathLike) -> Dict[str, Any]:
        """Load translations from a file.

        Args:
            location: Path to the translation file.

        Returns:
            Nested mapping of translations.

        Raises:
            InvalidFile: If the path is not a file.
            InvalidContents: If the file is not UTF-8 or does not decode to
                a mapping.
        """
        path = Path(location)
        if not path.is_file():
            logger.error("translation_file_not_found", path=str(path))
            raise InvalidFile(f"Invalid file: {path}")
        return self.read(path)

    def read(self, path: Path) -> Dict[str, Any]:
        """Decode an existing file and check that it holds a mapping."""
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            logger.error("translation_file_not_utf8", path=str(path), error=str(e))
            raise InvalidContents(f"Invalid file contents: {path}") from e

        data = self.decode(text)
        if not isinstance(data, dict):
            logger.error(
                "invalid_translation_contents",
                path=str(path),
                format=self.format,
                expected="dict",
            )
            raise InvalidContents(f"Invalid file contents: {path}")

        logger.info(
            "loaded_translation_file",
            path=str(path),
            format=self.format,
            key_count=len(data),
        )
        return data

    def dump(self, data: Mapping[str, Any], location: PathLike) -> bool:
        """Write translations to a file.

        Args:
            data: Nested or flat mapping of translations.
            location: Target path.

        Returns:
            True once the file has been written.

        Raises:
            OSError: If the file cannot be written.
        """
        path = Path(location)
        path.write_text(self.encode(data), encoding="utf-8")
        logger.info("wrote_translation_file", path=str(path), format=self.format)
        return True


class JSONTranslationLoader(TranslationLoader):
    """Adapter for JSON translation files."""

    format = "json"
    extensions = ("json",)

    def decode(self, text: str) -> Any:
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            logger.error("json_parse_error", error=str(e))
            raise InvalidContents(f"Invalid file contents: {e}") from e

    def encode(self, data: Mapping[str, Any]) -> str:
        return json.dumps(data, ensure_ascii=False, indent=4)


class INITranslationLoader(TranslationLoader):
    """Adapter for INI translation files.

    Sections become nested mappings; keys above the first section are
    top-level entries. Key case is preserved and values are not
    interpolated. Values wrapped in double quotes are unquoted.
    """

    format = "ini"
    extensions = ("ini",)

    ROOT_SECTION = "__root__"

    def _parser(self) -> configparser.ConfigParser:
        parser = configparser.ConfigParser(
            interpolation=None,
            default_section="__defaults__",
            strict=False,
        )
        parser.optionxform = str
        return parser

    @staticmethod
    def _unquote(value: str) -> str:
        if len(value) >= 2 and value[0] == value[-1] == '"':
            return value[1:-1]
        return value

    @staticmethod
    def _quote(value: Any) -> str:
        # Values the parser would strip or unquote on read
        text = str(value)
        if text != text.strip() or (len(text) >= 2 and text[0] == text[-1] == '"'):
            return f'"{text}"'
        return text

    def decode(self, text: str) -> Any:
        parser = self._parser()
        try:
            parser.read_string(f"[{self.ROOT_SECTION}]\n{text}")
        except configparser.Error as e:
            logger.error("ini_parse_error", error=str(e))
            raise InvalidContents(f"Invalid file contents: {e}") from e

        data: Dict[str, Any] = {}
        for section in parser.sections():
            values = {
                key: self._unquote(value or "")
                for key, value in parser.items(section, raw=True)
            }
            if section == self.ROOT_SECTION:
                data.update(values)
            else:
                data[section] = values
        return data

    def encode(self, data: Mapping[str, Any]) -> str:
        out = io.StringIO()
        root = {k: v for k, v in data.items() if not isinstance(v, (dict, list))}
        for key, value in root.items():
            out.write(f"{key} = {self._quote(value)}\n")
        if root:
            out.write("\n")

        parser = self._parser()
        for section, values in data.items():
            if section in root:
                continue
            parser[str(section)] = {
                k: self._quote(v) for k, v in flatten(values).items()
            }
        parser.write(out)
        return out.getvalue()


class YAMLTranslationLoader(TranslationLoader):
    """Adapter for YAML translation files."""

    format = "yaml"
    extensions = ("yml", "yaml")

    def decode(self, text: str) -> Any:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", error=str(e))
            raise InvalidContents(f"Invalid file contents: {e}") from e

    def encode(self, data: Mapping[str, Any]) -> str:
        return yaml.safe_dump(dict(data), allow_unicode=True, sort_keys=False)


_yaml_loader = YAMLTranslationLoader()

LOADERS: Dict[str, TranslationLoader] = {
    "json": JSONTranslationLoader(),
    "ini": INITranslationLoader(),
    "yaml": _yaml_loader,
    "yml": _yaml_loader,
}


def get_loader(file_format: str) -> TranslationLoader:
    """Return the adapter registered for a format tag (case-insensitive).

    Raises:
        InvalidFormat: If the tag is not registered.
    """
    loader = LOADERS.get(str(file_format).lower())
    if loader is None:
        logger.error("invalid_file_format", format=file_format)
        raise InvalidFormat(f"Invalid file format: {file_format}")
    return loader


def load_file(location: PathLike, file_format: str = "json") -> Dict[str, Any]:
    """Decode a translation file into a nested mapping.

    Raises:
        InvalidFile: If the path is not a file (checked before the format).
        InvalidFormat: If the format tag is not registered.
        InvalidContents: If the file does not decode to a mapping.
    """
    path = Path(location)
    if not path.is_file():
        logger.error("translation_file_not_found", path=str(path))
        raise InvalidFile(f"Invalid file: {path}")
    return get_loader(file_format).read(path)


def dump_file(
    data: Mapping[str, Any], location: PathLike, file_format: str = "json"
) -> bool:
    """Encode a mapping and write it to a translation file."""
    return get_loader(file_format).dump(data, location)
