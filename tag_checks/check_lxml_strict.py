"""
MUST HAVE REQUIREMENTS:
- Parse the provided document as strict XML via lxml with recover disabled.
- Never load DTDs, resolve entities or touch the network; this is well-formedness only.
- Exit with the failing line and lxml's message instead of silently fixing markup.
- Print success acknowledgement on valid input.
"""
# ----------------------------------
# Second opinion: strict XML parse with lxml
# ----------------------------------
import sys

from lxml import etree

if len(sys.argv) != 2:
    print("usage: python -m tag_checks.check_lxml_strict <path>", file=sys.stderr)
    sys.exit(2)

parser = etree.XMLParser(
    recover=False, load_dtd=False, resolve_entities=False, no_network=True
)
try:
    with open(sys.argv[1], "rb") as f:
        etree.fromstring(f.read(), parser=parser)
except OSError as exc:
    print(f"file error: {exc}", file=sys.stderr)
    sys.exit(2)
except etree.XMLSyntaxError as exc:
    print(f"xml parse failed at line {exc.lineno}: {exc.msg}")
    sys.exit(1)
print("lxml strict ok")
