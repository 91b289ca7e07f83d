from __future__ import annotations

def lowercase_first_char(text : str) -> str:
    """
    Lowercase the first character, leaving the rest untouched
    """
    return text[:1].lower() + text[1:]

def uppercase_first_char(text : str) -> str:
    """
    Uppercase the first character, leaving the rest untouched
    """
    return text[:1].upper() + text[1:]

class MdvdFormatting:
    """
    A formatting tag such as "y:i" (italics) or "c:$0000ff" (colour).

    The tag content is opaque. Identity ignores the case of the first character, which
    only encodes whether the tag applies to one line or to every line of a container line.
    That scope is decided when the tag is written, so the same tag can be emitted either way.
    """
    __slots__ = ('value',)

    def __init__(self, raw : str):
        self.value : str = lowercase_first_char(raw)

    @staticmethod
    def is_group_formatting(raw : str) -> bool:
        """
        True if raw tag content applies to the whole container line (uppercase first letter)
        """
        return raw[:1].isupper()

    @property
    def can_group(self) -> bool:
        """
        True if the tag can be written with container line scope and read back that way
        """
        return MdvdFormatting.is_group_formatting(uppercase_first_char(self.value))

    def to_formatting_string(self, group_scoped : bool) -> str:
        if group_scoped:
            return uppercase_first_char(self.value)
        return lowercase_first_char(self.value)

    def to_tag(self, group_scoped : bool) -> str:
        return "{" + self.to_formatting_string(group_scoped) + "}"

    def __eq__(self, other : object) -> bool:
        if not isinstance(other, MdvdFormatting):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other : MdvdFormatting) -> bool:
        return self.value < other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"MdvdFormatting({self.value!r})"

    def __str__(self) -> str:
        return self.value
