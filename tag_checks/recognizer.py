"""
MUST HAVE REQUIREMENTS:
- Recognize tag occurrences on a single line, left to right.
- Classify each occurrence as open, close or self (self-closing).
- A tag is closing when "/" directly follows "<"; self-closing when its text contains "/>".
- Closing wins over self-closing.
- Attach the 1-based line number when reading a document line by line.

Intuition:
The matcher only needs a name, the verbatim snippet and a line number.
Anything with no name right after "<" (comments, doctype, <?xml ... ?>) is not a tag here.
"""
# ----------------------------------
# Tag occurrences from lines of text
# ----------------------------------
import re
from collections import namedtuple

OPEN = "open"
CLOSE = "close"
SELF = "self"

tag_re = re.compile(r"<\s*/?([A-Za-z0-9_][\w.:-]*)([^>]*)>")

TagOccurrence = namedtuple("TagOccurrence", "text name kind line")


def scan_line(line):
    """Yield (text, name, kind) for every tag on the line."""
    for m in tag_re.finditer(line):
        text = m.group(0)
        if line[m.start() + 1] == "/":
            kind = CLOSE
        elif "/>" in text:
            kind = SELF
        else:
            kind = OPEN
        yield text, m.group(1), kind


def read_occurrences(lines):
    """Yield a TagOccurrence for every tag in an iterable of lines, numbering from 1."""
    for no, line in enumerate(lines, 1):
        for text, name, kind in scan_line(line):
            yield TagOccurrence(text, name, kind, no)
