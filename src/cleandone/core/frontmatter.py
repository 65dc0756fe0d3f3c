"""Front matter detection."""

from dataclasses import dataclass

from .grammar import split_lines, strip_separator

DELIMITER = "---"


@dataclass(frozen=True)
class MetadataHeader:
    """Location of the leading front matter block, if any."""

    exists: bool = False
    content_start: int = 0


def metadata_header(text: str) -> MetadataHeader:
    """
    Find a "---" delimited block at the top of the text.

    content_start is the offset just past the closing delimiter line.
    An unterminated block does not count as front matter.
    """
    lines = split_lines(text)
    if not lines or strip_separator(lines[0]).rstrip() != DELIMITER:
        return MetadataHeader()

    offset = len(lines[0])
    for line in lines[1:]:
        offset += len(line)
        if strip_separator(line).rstrip() == DELIMITER:
            return MetadataHeader(exists=True, content_start=offset)

    return MetadataHeader()
