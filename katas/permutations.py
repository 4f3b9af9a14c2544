from typing import Iterator


def get_permutations(chars: str) -> Iterator[str]:
    """
    Yields every ordering of `chars` (assumed distinct), lazily.

    Each character in turn is placed first, followed by every ordering of
    the rest: 'abc' → abc, acb, bac, bca, cab, cba. Uses an explicit stack
    of (prefix, remaining) pairs instead of recursion.
    """
    stack = [("", chars)]
    while stack:
        prefix, remaining = stack.pop()
        if len(remaining) <= 1:
            yield prefix + remaining
            continue
        # pushed in reverse so the first character is expanded first
        for i in reversed(range(len(remaining))):
            stack.append((prefix + remaining[i], remaining[:i] + remaining[i + 1:]))
