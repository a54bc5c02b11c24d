"""LED name sanitization domain service.

Kernel LED names follow the "devicename:color:function" convention and
often contain dashes (e.g. "input3::capslock", "tpacpi::power-led").
Label values keep the name readable while mapping the separator
characters onto underscores.

Sanitization Rules:
- ":" and "-" become "_"
- Every other character is kept as-is
- Output length equals input length
"""

from __future__ import annotations

# Characters rewritten to "_" in label values
LABEL_UNSAFE_CHARACTERS: str = ":-"

_LABEL_TRANSLATION = str.maketrans({char: "_" for char in LABEL_UNSAFE_CHARACTERS})


def led_label(name: str) -> str:
    """Map a raw LED device name to its metric label value.

    Total and idempotent: any string is accepted, and a sanitized
    name passes through unchanged.

    Args:
        name: Raw device name as reported by the device source.

    Returns:
        The name with every ":" and "-" replaced by "_".
    """
    return name.translate(_LABEL_TRANSLATION)
