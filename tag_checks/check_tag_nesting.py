"""
MUST HAVE REQUIREMENTS:
- Take exactly one document path; print usage and validate nothing otherwise.
- Print every defect in report order, then the pass/fail banner.
- Exit 1 when errors were found, 2 on usage or file errors, 3 if a container invariant breaks.
- On an invariant break still print the defects recorded up to that point.
"""
# ----------------------------------
# Check tag nesting of one document
# ----------------------------------
import sys

from tag_checks.containers import ContainerError
from tag_checks.matcher import TagMatcher, check_file
from tag_checks.report import defect_line, render


def main(path, matcher_cls=TagMatcher):
    m = matcher_cls()
    try:
        verdict = check_file(path, m)
    except OSError as exc:
        print(f"file error: {exc}", file=sys.stderr)
        return 2
    except ContainerError as exc:
        for tag in m.defects:
            print(defect_line(tag))
        print(f"internal error: {exc}", file=sys.stderr)
        return 3

    # ----------------------------------
    # Report outcome
    # ----------------------------------
    for line in render(verdict):
        print(line)
    return 1 if verdict.errors_found else 0


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("usage: python -m tag_checks.check_tag_nesting <path>", file=sys.stderr)
        sys.exit(2)
    sys.exit(main(sys.argv[1]))
