"""
Format template parsing for heliumlog.

A format template is a string containing placeholder tokens of the form
``(%name)``. Templates are compiled once, when they are assigned to a
logger, into an ordered sequence of segments that the substitution engine
walks for every log call.

Recognized tokens:
    (%msg)       Log message
    (%func)      Originating function name
    (%line)      Originating line number
    (%file)      Originating file (basename unless full paths are enabled)
    (%type)      Severity description, e.g. ``WARNING``
    (%date)      Timestamp rendered by the logger's date formatter
    (%label)     Handler label (structlog / stdlib adapters)
    (%metadata)  Rendered ``key=value`` metadata (adapters)

Anything else that looks like a token, e.g. ``(%noSoupForYou)``, is kept as
literal text. Unknown tokens never cause an error, so templates written for
a newer or older token vocabulary keep rendering.

Compiled templates are kept in normal form: no empty literals and never two
literals in a row. Under that form, parsing a template's own text yields an
equal template.

Example:
    >>> template = parse_format("[(%date)] (%type): (%msg)")
    >>> template.segments
    (Literal(text='['), Token(field=<Field.DATE: '(%date)'>), Literal(text='] '), ...)
    >>> parse_format(template.text) == template
    True
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Tuple, Union

TOKEN_PATTERN = re.compile(r"\(%\w+\)")


class Field(str, Enum):
    """Template fields, valued by their placeholder spelling."""

    MESSAGE = "(%msg)"
    FUNCTION = "(%func)"
    LINE = "(%line)"
    FILE = "(%file)"
    TYPE = "(%type)"
    DATE = "(%date)"
    LABEL = "(%label)"
    METADATA = "(%metadata)"

    @property
    def placeholder(self) -> str:
        return self.value


_FIELDS_BY_PLACEHOLDER: Dict[str, Field] = {f.value: f for f in Field}


@dataclass(frozen=True)
class Literal:
    """Verbatim text copied into the rendered line."""

    text: str


@dataclass(frozen=True)
class Token:
    """A placeholder replaced by a computed value at render time."""

    field: Field


Segment = Union[Literal, Token]


@dataclass(frozen=True)
class FormatTemplate:
    """
    A compiled format template.

    Attributes:
        segments (Tuple[Segment, ...]): Literal and token segments in
            rendering order, in normal form

    Use ``parse_format`` to compile a string, or ``from_segments`` to build
    a template from hand-assembled segments.
    """

    segments: Tuple[Segment, ...] = ()

    @classmethod
    def from_segments(cls, segments: Iterable[Segment]) -> "FormatTemplate":
        """Build a template, dropping empty literals and merging adjacent ones."""
        return cls(tuple(_normalize(segments)))

    @property
    def text(self) -> str:
        """Textual form of the template, suitable for ``parse_format``."""
        return "".join(
            s.text if isinstance(s, Literal) else s.field.placeholder
            for s in self.segments
        )

    @property
    def fields(self) -> Tuple[Field, ...]:
        return tuple(s.field for s in self.segments if isinstance(s, Token))

    def uses(self, field: Field) -> bool:
        return field in self.fields

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)


def _normalize(segments: Iterable[Segment]) -> List[Segment]:
    result: List[Segment] = []
    pending = ""
    for segment in segments:
        if isinstance(segment, Literal):
            pending += segment.text
            continue
        if pending:
            result.append(Literal(pending))
            pending = ""
        result.append(segment)
    if pending:
        result.append(Literal(pending))
    return result


def parse_format(format_string: str) -> FormatTemplate:
    """
    Compile a template string into a FormatTemplate.

    Performs a single left-to-right regular expression pass over all
    ``(%word)`` occurrences. Text between matches becomes literal text,
    recognized placeholders become tokens, and unrecognized placeholders
    are treated as literal text.

    Args:
        format_string: Template text, e.g. ``"(%date) [(%type)] (%msg)"``

    Returns:
        FormatTemplate: The compiled template; empty for an empty string
    """
    segments: List[Segment] = []
    position = 0
    for match in TOKEN_PATTERN.finditer(format_string):
        if match.start() > position:
            segments.append(Literal(format_string[position : match.start()]))

        field = _FIELDS_BY_PLACEHOLDER.get(match.group(0))
        if field is None:
            segments.append(Literal(match.group(0)))
        else:
            segments.append(Token(field))
        position = match.end()

    if position < len(format_string):
        segments.append(Literal(format_string[position:]))

    return FormatTemplate.from_segments(segments)
