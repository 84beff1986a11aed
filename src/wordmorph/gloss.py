"""Gloss (meaning/etymology) lookup for a clicked word.

The actual lookups are done by injected provider callables (remote definition services,
public dictionary APIs, phrase databases, translators).  This module only fixes the data
they supply and the order in which they are consulted:

1. The primary provider is always asked.
2. Each fallback provider is asked only while no meaning has been found yet.
3. The English meaning supplied by one designated fallback (the first, by default) may
   be translated.  If the translation fails, the English meaning is kept.  Meanings from
   other fallbacks are used untranslated.

A failing provider is treated as "no data" and never raises into the caller.
"""

import sys
import traceback
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
from typing import TextIO

from wordmorph.errors import InvalidWord
from wordmorph.lexicon import sanitize_word


@dataclass(frozen=True)
class Gloss:
    """Lookup result for a single word."""

    word: str
    meaning: str | None = None
    etymology: str | None = None
    note: str | None = None
    """Human-readable provenance note, e.g. which service supplied the meaning."""
    source: str | None = None

    @property
    def has_meaning(self) -> bool:
        return bool(self.meaning and self.meaning.strip())


GlossProvider = Callable[[str], Gloss | None]
Translator = Callable[[str], str | None]


def merge_notes(*notes: str | None) -> str | None:
    """Join the non-blank notes with "; ", or return None if there are none."""
    filtered = [n.strip() for n in notes if n and n.strip()]
    return "; ".join(filtered) if filtered else None


def _ask(provider: GlossProvider, word: str, out: TextIO) -> Gloss | None:
    try:
        return provider(word)
    except Exception as e:
        name = getattr(provider, "__name__", repr(provider))
        print(f"Gloss provider {name} failed for {word!r}: {e}", file=out, flush=True)
        print(traceback.format_exc(), file=out, flush=True)
        return None


def _translate(translate: Translator, english: str, out: TextIO) -> str | None:
    try:
        translated = translate(english)
    except Exception as e:
        print(f"Meaning translation failed: {e}", file=out, flush=True)
        return None
    return translated.strip() if translated and translated.strip() else None


def lookup_gloss(
    word: str,
    primary: GlossProvider,
    fallbacks: Sequence[GlossProvider] = (),
    *,
    translate: Translator | None = None,
    translate_fallback_index: int = 0,
    out: TextIO | None = None,
) -> Gloss | None:
    """Look up the gloss of `word`, falling back through providers until one has a meaning.

    Args:
        word: Word to look up (sanitized first).
        primary: Provider consulted first.
        fallbacks: Providers consulted in order, each only while no meaning has been found.
        translate: Optional translator for the English meaning of one fallback.
        translate_fallback_index: Index in `fallbacks` of the provider whose meaning is
            English and gets translated.  Meanings from other fallbacks are kept as-is.
        out: Stream for provider error reports (defaults to stderr).

    Returns:
        The merged Gloss, or None if no provider returned anything.

    Raises:
        InvalidWord: If `word` is not made of letters a-z.
    """
    sanitized = sanitize_word(word)
    if not sanitized:
        raise InvalidWord(f"Cannot look up {word!r}: letters a-z only.")
    out = out or sys.stderr

    result = _ask(primary, sanitized, out)
    for index, fallback in enumerate(fallbacks):
        if result is not None and result.has_meaning:
            break
        extra = _ask(fallback, sanitized, out)
        if extra is None or not extra.has_meaning:
            continue

        meaning, note = extra.meaning, extra.note
        if translate is not None and index == translate_fallback_index:
            translated = _translate(translate, extra.meaning, out)
            if translated:
                meaning = f"{translated}\n\n(English)\n{extra.meaning}"
                note = f"{extra.note} (machine translated)" if extra.note else "machine translated"

        if result is None:
            result = replace(extra, word=sanitized, meaning=meaning, note=note)
        else:
            result = replace(
                result,
                meaning=meaning,
                etymology=result.etymology or extra.etymology,
                note=merge_notes(result.note, note),
            )

    return result
