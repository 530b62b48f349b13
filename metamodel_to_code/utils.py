"""
Identifier sanitizing for generated Python code.

Schema names are camelCase or PascalCase and may collide with Python
keywords; these helpers map them onto valid, stable Python identifiers.
"""

import keyword
import re

# Any character that cannot appear in an identifier
_INVALID_IDENTIFIER_CHARS = re.compile(r"[^a-zA-Z0-9_]")

# Uppercase letters, each one starts a new snake_case word
_UPPERCASE = re.compile(r"([A-Z])")

# Names a field can never take: keywords, soft keywords and the codec methods
RESERVED_FIELD_NAMES = frozenset(keyword.kwlist) | frozenset(keyword.softkwlist) | {"to_json", "from_json"}


def _capitalize_first(text: str) -> str:
    """Uppercase the first character, leave the rest untouched."""
    return text[:1].upper() + text[1:]


def sanitize_type_name(name: str) -> str:
    """Convert a schema entity name to a class name.

    Examples:
        "textDocument" -> "TextDocument"
        "_InitializeParams" -> "InitializeParams"
    """
    if name.startswith("_"):
        name = name[1:]
    return _capitalize_first(name)


def sanitize_enum_variant(name: str) -> str:
    """Convert an enumeration value name to an enum member name.

    Examples:
        "plainText" -> "PlainText"
        "source.organizeImports" -> "Source_organizeImports"
        "None" -> "None_"
    """
    result = _INVALID_IDENTIFIER_CHARS.sub("_", _capitalize_first(name))
    if keyword.iskeyword(result):
        result = result + "_"
    return result


def sanitize_field_name(name: str) -> str:
    """Convert a camelCase property name to a snake_case field name.

    The transform is idempotent: applying it to its own output is a no-op.

    Examples:
        "textDocument" -> "text_document"
        "URI" -> "u_r_i"
        "from" -> "from_"
        "_Bar" -> "bar"
    """
    result = _UPPERCASE.sub(r"_\1", name).lower()
    result = result.lstrip("_")
    if result in RESERVED_FIELD_NAMES:
        result = result + "_"
    return result


def format_doc(doc: str, max_length: int = 100) -> str:
    """Keep only the first line of a documentation string, truncated."""
    lines = doc.splitlines()
    if not lines:
        return ""
    return lines[0][:max_length].rstrip()
