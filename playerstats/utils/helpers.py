from typing import TypeVar

T = TypeVar("T")


def plural_suffix(count: int) -> str:
    """
    Return the English plural suffix for a count.

    Args:
        count: Number of items

    Returns:
        "s" for zero or more than one item, "" for exactly one
    """
    return "s" if count == 0 or count > 1 else ""


def pluralize(count: int, word: str) -> str:
    """Append the plural suffix for ``count`` to ``word``."""
    return f"{word}{plural_suffix(count)}"


def append_and_return(items: list[T], item: T) -> T:
    """
    Append an item to a list and hand it back.

    Args:
        items: List to extend
        item: Item to append

    Returns:
        The same item that was appended
    """
    items.append(item)
    return item
