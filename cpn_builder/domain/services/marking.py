from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


def create_marking_text(tokens: Mapping[str, int]) -> str:
    """Render ``{token: count}`` as a multiset such as ``2`a++1`b``.

    Tokens with a count of zero or less are left out.
    """
    return "++".join(
        f"{count}`{token}" for token, count in tokens.items() if count > 0
    )
