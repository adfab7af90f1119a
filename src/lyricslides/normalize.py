"""Search normalisation for Twi orthography.

Twi uses three letters outside basic Latin.  Users searching on a plain
keyboard type the nearest ASCII letter, so both the stored text and the
query are folded through :func:`normalize` before comparison::

    ɛ Ɛ  ->  e
    ɔ Ɔ  ->  o
    ŋ Ŋ  ->  n
"""

_TWI_TO_ASCII = str.maketrans({
    "ɛ": "e",
    "Ɛ": "e",
    "ɔ": "o",
    "Ɔ": "o",
    "ŋ": "n",
    "Ŋ": "n",
})


def normalize(text: str) -> str:
    """Return *text* lowercased with Twi letters mapped to ASCII."""
    return text.lower().translate(_TWI_TO_ASCII)
