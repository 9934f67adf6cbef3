"""
MUST HAVE REQUIREMENTS:
- Accept a target document path and prefer the virtualenv python if present.
- Run the tag nesting check first, then the strict lxml parse, each as "python -m" with only the path.
- Only the nesting check decides the outcome: stop on its failure, printing its output and exiting with its code.
- A failed strict lxml parse is printed as a note and never fails the run.
- Print the document checksum when the nesting check succeeds.
"""
import hashlib
import os
import subprocess
import sys

if len(sys.argv) != 2:
    print("usage: python run_tag_checks.py <path>", file=sys.stderr)
    sys.exit(2)

target = sys.argv[1]
root = os.path.dirname(os.path.abspath(__file__))
venv_py = os.path.join(root, ".venv", "bin", "python3")
python = venv_py if os.path.exists(venv_py) else sys.executable
# (module, gates the run)
checks = [
    ("tag_checks.check_tag_nesting", True),
    ("tag_checks.check_lxml_strict", False),
]
for mod, gate in checks:
    proc = subprocess.run(
        [python, "-m", mod, os.path.abspath(target)],
        text=True,
        capture_output=True,
        cwd=root,
    )
    if not proc.returncode:
        continue
    if gate:
        print(proc.stdout + proc.stderr)
        sys.exit(proc.returncode)
    print(f"note: {(proc.stdout + proc.stderr).strip()}")

with open(target, "rb") as f:
    checksum = hashlib.sha256(f.read()).hexdigest()
print(f"{target} {checksum}")
