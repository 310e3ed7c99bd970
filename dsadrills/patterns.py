"""Star patterns drawn on a character grid."""

_V_HEIGHT = 5
_V_WIDTH = 9


def v_pattern():
    """Return a letter V drawn in stars, five rows of nine two-character cells."""
    lines = []
    for row in range(_V_HEIGHT):
        cells = (
            "* " if col in (row, _V_WIDTH - 1 - row) else "  "
            for col in range(_V_WIDTH)
        )
        lines.append("".join(cells))
    return "\n".join(lines) + "\n"