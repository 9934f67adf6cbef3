"""
MUST HAVE REQUIREMENTS:
- Render one line per defect: "Error at line: <N> <snippet> is not constructed correctly."
- Print a single confirmation line when the verdict carries no errors, a failure banner otherwise.
"""
# ----------------------------------
# Verdict rendering
# ----------------------------------
OK = "tag nesting satisfied"
FAILED = "tag nesting has errors"


def defect_line(tag):
    return f"Error at line: {tag.line} {tag.text} is not constructed correctly."


def render(verdict):
    out = [defect_line(tag) for tag in verdict.defects]
    # anomalies that cancelled in reconciliation still leave errors_found set,
    # so the banner can fail with no defect lines above it
    out.append(FAILED if verdict.errors_found else OK)
    return out
