"""Grawlix styles: the characters (or fixed strings) used for replacements."""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Union

from .errors import GrawlixStyleError
from .generator import get_fill_grawlix, get_random_grawlix

__all__ = ["Style", "GrawlixStyle", "STYLES", "to_grawlix_style"]

Chars = Union[str, Callable[[int], str], None]


class Style:
    """Names of the built-in styles."""

    ASCII = "ascii"
    ASTERIX = "asterix"
    DINGBATS = "dingbats"
    NEXTWAVE = "nextwave"
    REDACTED = "redacted"
    UNICODE = "unicode"
    UNDERSCORE = "underscore"


def _char_list(chars: Union[str, Iterable[str]]) -> List[str]:
    if isinstance(chars, str):
        return list(chars)
    return list("".join(c for c in chars if isinstance(c, str)))


class GrawlixStyle:
    """A replacement theme.

    ``chars`` is either a palette string (one character means fill-only) or a
    callable ``(length) -> str``. ``fixed`` maps filter words to literal
    replacements used when randomization is off.
    """

    def __init__(self, name: Optional[str], options: Optional[Mapping[str, Any]] = None):
        self.name = name
        self.chars: Chars = None
        self.fixed: Dict[str, str] = {}
        self.is_override_allowed = True
        self.configure(options)

    def __repr__(self) -> str:
        return f"<GrawlixStyle name={self.name!r}>"

    def is_valid(self) -> bool:
        if not isinstance(self.name, str) or not self.name:
            return False
        has_chars = callable(self.chars) or (isinstance(self.chars, str) and len(self.chars) > 0)
        return has_chars or len(self.fixed) > 0

    def can_randomize(self) -> bool:
        return callable(self.chars) or (isinstance(self.chars, str) and len(self.chars) > 1)

    def get_random_grawlix(self, length: int) -> str:
        if not self.can_randomize():
            raise GrawlixStyleError("style does not support random grawlixes", style=self)
        if callable(self.chars):
            return self.chars(length)
        return get_random_grawlix(self.chars, length)

    def get_fill_grawlix(self, length: int) -> str:
        if not isinstance(self.chars, str) or not self.chars:
            raise GrawlixStyleError("style has no fill character", style=self)
        return get_fill_grawlix(self.chars, length)

    def has_fixed(self, word: str) -> bool:
        return bool(self.fixed.get(word))

    def get_fixed(self, word: str) -> Optional[str]:
        return self.fixed.get(word)

    # ---- character editing ----
    def _editable_chars(self) -> str:
        if callable(self.chars):
            raise GrawlixStyleError("can't edit the characters of a generator style", style=self)
        return self.chars or ""

    def add_chars(self, chars: Union[str, Iterable[str]]) -> int:
        """Append characters not already in the palette; returns how many."""
        current = self._editable_chars()
        added = 0
        for c in _char_list(chars):
            if c not in current:
                current += c
                added += 1
        self.chars = current
        return added

    def remove_chars(self, chars: Union[str, Iterable[str]]) -> int:
        current = self._editable_chars()
        removed = 0
        for c in dict.fromkeys(_char_list(chars)):
            if c in current:
                current = current.replace(c, "")
                removed += 1
        self.chars = current
        return removed

    def replace_chars(self, replacements: Mapping[str, str]) -> int:
        current = self._editable_chars()
        replaced = 0
        for old, new in replacements.items():
            if isinstance(new, str) and old and old in current:
                current = current.replace(old, new)
                replaced += 1
        self.chars = current
        return replaced

    def configure(self, options: Optional[Mapping[str, Any]]) -> None:
        if not options:
            return
        char = options.get("char")
        if isinstance(char, str) and char:
            self.chars = char
        random_chars = options.get("random_chars")
        if isinstance(random_chars, str) and random_chars:
            self.chars = random_chars
        elif callable(random_chars):
            self.chars = random_chars
        elif isinstance(random_chars, Mapping):
            if "add" in random_chars:
                self.add_chars(random_chars["add"])
            if "remove" in random_chars:
                self.remove_chars(random_chars["remove"])
            if isinstance(random_chars.get("replace"), Mapping):
                self.replace_chars(random_chars["replace"])
        fixed = options.get("fixed")
        if isinstance(fixed, Mapping):
            for word, repl in fixed.items():
                if repl is None or repl is False:
                    self.fixed.pop(word, None)
                elif isinstance(repl, str):
                    self.fixed[word] = repl
        if isinstance(options.get("allow_override"), bool):
            self.is_override_allowed = options["allow_override"]

    def clone(self) -> "GrawlixStyle":
        style = GrawlixStyle(self.name)
        style.chars = self.chars
        style.fixed = dict(self.fixed)
        style.is_override_allowed = self.is_override_allowed
        return style


def to_grawlix_style(obj: Any) -> GrawlixStyle:
    """Build a :class:`GrawlixStyle` from a descriptor dict."""
    if isinstance(obj, GrawlixStyle):
        if not obj.is_valid():
            raise GrawlixStyleError("invalid GrawlixStyle", style=obj)
        return obj
    if not isinstance(obj, Mapping):
        raise GrawlixStyleError("style must be a mapping or GrawlixStyle", style=obj)
    name = obj.get("name")
    if not isinstance(name, str) or not name:
        raise GrawlixStyleError("name parameter is required", style=obj)
    if not any(k in obj for k in ("char", "random_chars", "fixed")):
        raise GrawlixStyleError("char, random_chars or fixed parameter is required", style=obj)
    style = GrawlixStyle(name, obj)
    if not style.is_valid():
        raise GrawlixStyleError("style has no usable characters or fixed replacements", style=obj)
    return style


STYLES: List[GrawlixStyle] = [
    GrawlixStyle(Style.ASCII, {
        "random_chars": "@!#$%^&*",
        "fixed": {
            "fuck": "%!&#",
            "motherfuck": "%*^##*%!&#",
            "motherfucker": "%*^##*%!&#",
            "shit": "$#!%",
            "dick": "%!&#",
            "piss": "&!$#",
            "cunt": "#^&%",
            "cocksuck": "#*#%$!#%",
            "cocksucker": "#*#%$!#%",
            "ass": "@$%",
            "asses": "@$$#$",
            "asshole": "@$$#%!&",
            "assholes": "@$$#%!&$",
            "dumbass": "@$%",
            "bastard": "%@$%@*#",
            "bitch": "%!#*%",
            "tit": "%!%",
            "tits": "%!%$",
            "titty": "%!%%^",
            "tittie": "%!%%!#",
            "titties": "%!%%!#$",
        },
    }),
    GrawlixStyle(Style.DINGBATS, {
        "random_chars": "★☒☎☠☢☣☹♡♢♤♧⚓⚔⚑⚡♯✓☝",
        "fixed": {
            "fuck": "⚑☠♧⚔",
            "motherfuck": "★☹⚓♯⚡☢⚑☠♧⚔",
            "motherfucker": "★☹⚓♯⚡☢⚑☠♧⚔",
            "shit": "☠♯☝⚓",
            "dick": "♢☝♧⚔",
            "piss": "☣☝☠☠",
            "cunt": "♧♡⚔⚓",
            "cocksuck": "♧☹♧⚔☠♡♧⚔",
            "cocksucker": "♧☹♧⚔☠♡♧⚔",
            "ass": "☹☠☠",
            "asses": "☹☠☠♯☠",
            "asshole": "☹☠☠♯☢✓⚡",
            "assholes": "☹☠☠♯☢✓⚡☠",
            "dumbass": "☹☠☠",
            "bastard": "☣☹☠⚓@☢♢",
            "bitch": "☣☝⚓♧♯",
            "tit": "⚓☝⚓",
            "tits": "⚓☝⚓☠",
            "titty": "⚓☝⚓⚓⚔",
            "tittie": "⚓☝⚓⚓☝♯",
            "titties": "⚓☝⚓⚓☝♯☠",
        },
    }),
    GrawlixStyle(Style.UNICODE, {
        "random_chars": "!@#$%★☒☎☠☢☣☹♡♢♤♧⚓⚔⚑⚡",
        "fixed": {
            "fuck": "⚑☠♧⚔",
            "motherfuck": "★☹⚓#⚡☢⚑☠♧⚔",
            "motherfucker": "★☹⚓#⚡☢⚑☠♧⚔",
            "shit": "$#!⚓",
            "dick": "♢!♧⚔",
            "piss": "☣!$$",
            "cunt": "♧♡⚔⚓",
            "cocksuck": "♧☹♧⚔$♡♧⚔",
            "cocksucker": "♧☹♧⚔$♡♧⚔",
            "ass": "@$☠",
            "asses": "@$$#$",
            "asshole": "@$$#☢!⚡",
            "assholes": "@$$#☢!⚡$",
            "dumbass": "@$☠",
            "bastard": "☣@$⚓@☢♢",
            "bitch": "☣!⚓♧#",
            "tit": "⚓!⚓",
            "tits": "⚓!⚓$",
            "titty": "⚓!⚓⚓⚔",
            "tittie": "⚓!⚓⚓!#",
            "titties": "⚓!⚓⚓!#$",
        },
    }),
    # single-character (fill only) styles
    GrawlixStyle(Style.ASTERIX, {"char": "*"}),
    GrawlixStyle(Style.NEXTWAVE, {"char": "☠"}),
    GrawlixStyle(Style.REDACTED, {"char": "█"}),
    GrawlixStyle(Style.UNDERSCORE, {"char": "_"}),
]
