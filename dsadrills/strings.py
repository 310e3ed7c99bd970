"""String drills."""


def reverse_words(text):
    """Reverse each space-separated word of ``text`` in place.

    Every word is followed by a space, so a text that does not end in a
    space gains one.
    """
    parts = text.split(" ")
    reversed_text = " ".join(part[::-1] for part in parts)
    return reversed_text + " " if parts[-1] else reversed_text