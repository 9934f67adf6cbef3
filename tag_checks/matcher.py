"""
MUST HAVE REQUIREMENTS:
- Scan tag occurrences in document order with one open-tag stack and two anomaly queues.
- Ignore self-closing tags; push opening tags unconditionally.
- Resolve each closing tag by the first rule that applies:
  1. top of stack has the same name: pop it.
  2. front of the error queue has the same name: dequeue it and report it.
  3. stack is empty: enqueue the closer on the error queue.
  4. otherwise search the stack; on a match unwind everything above it into the error queue
     and drop the match, else enqueue the closer on the extras queue.
- After the scan, reconcile: drain the stack into the error queue, flush a lone non-empty queue,
  and when both queues hold entries either cancel equal-named fronts or report the error-queue front.
- Keep the exact report order; every run owns fresh containers.

Intuition:
The error queue holds tags we are fairly sure are wrong (closers with nothing open, tags skipped
over by a deeper closer, tags still open at the end). The extras queue holds closers that had
no ancestor at all. A name sitting at the front of both is one crossing, not two errors.

Known quirk: when both queues are non-empty only the error-queue front advances on a mismatch,
so report order follows which queue an anomaly landed in, not strictly document order.
"""
# ----------------------------------
# Tag matching engine and reconciliation
# ----------------------------------
from collections import namedtuple

from tag_checks.containers import Queue, Stack
from tag_checks.recognizer import CLOSE, OPEN, read_occurrences

Verdict = namedtuple("Verdict", "errors_found defects")


class TagMatcher:
    def __init__(self):
        self.stack = Stack()
        self.error_queue = Queue()
        self.extras_queue = Queue()
        self.defects = []
        self.errors_found = False

    def report(self, tag):
        self.defects.append(tag)
        self.errors_found = True

    # ----------------------------------
    # Scan phase
    # ----------------------------------
    def observe(self, tag):
        if tag.kind == OPEN:
            self.stack.push(tag)
        elif tag.kind == CLOSE:
            self.close(tag)

    def close(self, tag):
        stack = self.stack
        errors = self.error_queue
        if not stack.is_empty() and stack.peek().name == tag.name:
            stack.pop()
        elif not errors.is_empty() and errors.peek().name == tag.name:
            self.report(errors.dequeue())
        elif stack.is_empty():
            errors.enqueue(tag)
            self.errors_found = True
        elif any(open_tag.name == tag.name for open_tag in stack):
            while stack.peek().name != tag.name:
                errors.enqueue(stack.pop())
                self.errors_found = True
            stack.pop()
        else:
            self.extras_queue.enqueue(tag)
            self.errors_found = True

    # ----------------------------------
    # Reconciliation phase
    # ----------------------------------
    def drain_stack(self):
        while not self.stack.is_empty():
            self.error_queue.enqueue(self.stack.pop())
            self.errors_found = True

    def reconcile(self):
        errors = self.error_queue
        extras = self.extras_queue
        self.drain_stack()
        while not errors.is_empty() or not extras.is_empty():
            self.drain_stack()
            if errors.is_empty() != extras.is_empty():
                while not errors.is_empty():
                    self.report(errors.dequeue())
                while not extras.is_empty():
                    self.report(extras.dequeue())
            if not errors.is_empty() and not extras.is_empty():
                if errors.peek().name != extras.peek().name:
                    self.report(errors.dequeue())
                else:
                    errors.dequeue()
                    extras.dequeue()
        return Verdict(self.errors_found, list(self.defects))


def check_lines(lines, m=None):
    """Scan lines into m (a fresh TagMatcher by default) and reconcile."""
    if m is None:
        m = TagMatcher()
    for tag in read_occurrences(lines):
        m.observe(tag)
    return m.reconcile()


def check_file(path, m=None):
    """Validate the document at path; OSError propagates to the caller."""
    with open(path, encoding="utf-8", errors="replace") as f:
        return check_lines(f, m)
