"""String formatting and printing exercises."""

from __future__ import annotations

import json
from collections.abc import Iterator


def _quote(text: str) -> str:
    """Return text as a double-quoted literal with escapes."""
    return json.dumps(text, ensure_ascii=False)


def _printing_lines() -> Iterator[str]:
    """Yield every line the printing exercises print, in order."""
    err = ValueError("oopsie-daisy")
    yield (
        f"integers: {10:d}, floats: {3.14:f}, strings: {'Hello World!'}, "
        f"quoted: {_quote('quoted text')}, verbose: {err}"
    )

    name = "Nejc"
    yield "Hello, " + name + "! Welcome to Go."

    lastname = "Cencljotka"
    yield f"Ime in Priimek: {name} {lastname}"

    input_string = "some string foobar"
    yield f"inputString has: {len(input_string.encode())} characters"

    yield "im a lowercase".upper()
    yield "IM AN UPPERCASE".lower()

    opinion = "Go is boring"
    if opinion == "Go is boring":
        opinion = "Go is awesome"
    yield opinion
    yield "Go is boring".replace("boring", "awesome")

    name, age, country = "Aljoša", 23, "Serbia"
    yield f"Name: {name}, | Age: {age:d}, | Country: {country}"

    yield f"{_quote('quote')}, {'se uporablja k quotaš'}, {chr(92)}"

    yield " ".join(["The", "sky", "is", "blue"])


def printing_exercises() -> None:
    """Print the output of every printing exercise."""
    for line in _printing_lines():
        print(line)