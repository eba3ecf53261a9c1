"""English → Urdu translation by static lookup.

Phrases are matched before single words (longest key first) on word
boundaries, case-insensitively.  Anything missing from the lexicon passes
through unchanged.
"""

from __future__ import annotations

import re

URDU_LEXICON: dict[str, str] = {
    # Phrases
    "in conclusion": "آخر میں",
    "for example": "مثال کے طور پر",
    "as a result": "نتیجے کے طور پر",
    "in addition": "اس کے علاوہ",
    "on the other hand": "دوسری طرف",
    "artificial intelligence": "مصنوعی ذہانت",
    "machine learning": "مشین لرننگ",
    # Cue words
    "important": "اہم",
    "key": "کلیدی",
    "main": "مرکزی",
    "primary": "بنیادی",
    "significant": "نمایاں",
    "crucial": "انتہائی اہم",
    "essential": "ضروری",
    "major": "بڑا",
    "fundamental": "بنیادی",
    "critical": "نازک",
    "vital": "لازمی",
    "necessary": "ضروری",
    "first": "پہلا",
    "second": "دوسرا",
    "third": "تیسرا",
    "finally": "آخر کار",
    "conclusion": "نتیجہ",
    "result": "نتیجہ",
    "therefore": "لہذا",
    "because": "کیونکہ",
    "however": "تاہم",
    "although": "اگرچہ",
    "despite": "باوجود",
    "furthermore": "مزید برآں",
    "moreover": "علاوہ ازیں",
    # Common vocabulary
    "blog": "بلاگ",
    "post": "پوسٹ",
    "article": "مضمون",
    "summary": "خلاصہ",
    "content": "مواد",
    "information": "معلومات",
    "technology": "ٹیکنالوجی",
    "data": "ڈیٹا",
    "business": "کاروبار",
    "people": "لوگ",
    "world": "دنیا",
    "time": "وقت",
    "day": "دن",
    "year": "سال",
    "work": "کام",
    "life": "زندگی",
    "health": "صحت",
    "education": "تعلیم",
    "knowledge": "علم",
    "future": "مستقبل",
    "new": "نیا",
    "good": "اچھا",
    "best": "بہترین",
    "help": "مدد",
    "use": "استعمال",
    "learn": "سیکھنا",
    "problem": "مسئلہ",
    "solution": "حل",
    "and": "اور",
    "or": "یا",
    "but": "لیکن",
    "is": "ہے",
    "are": "ہیں",
    "the": "",
    "this": "یہ",
    "that": "وہ",
    "with": "کے ساتھ",
    "for": "کے لیے",
    "from": "سے",
    "in": "میں",
    "of": "کا",
    "to": "کو",
}

_TOKEN_RE = re.compile(
    r"\b(?:"
    + "|".join(re.escape(key) for key in sorted(URDU_LEXICON, key=len, reverse=True))
    + r")\b",
    re.IGNORECASE,
)
_SPACES_RE = re.compile(r" {2,}")


def translate_to_urdu(text: str) -> str:
    """Translate *text* word-by-word using :data:`URDU_LEXICON`."""
    if not text:
        return ""
    translated = _TOKEN_RE.sub(lambda m: URDU_LEXICON[m.group(0).lower()], text)
    return _SPACES_RE.sub(" ", translated).strip()
