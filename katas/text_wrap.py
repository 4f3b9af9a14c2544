from typing import Iterator


def wrap_text(text: str, columns: int) -> Iterator[str]:
    """
    Yields the lines of `text` wrapped greedily at `columns`.

    Lines break at spaces only. A word longer than `columns` is never
    split; it gets a line of its own.
    """
    line = ""
    for word in text.split(" "):
        if not line:
            line = word
        elif len(line) + 1 + len(word) <= columns:
            line += " " + word
        else:
            yield line
            line = word
    if line:
        yield line
