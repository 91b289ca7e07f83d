"""
Minimal gettext wrapper so that user-facing messages can be translated.

Catalogs are looked up in the `locales` directory beside the package; when no catalog
exists for the active language the identity translation is used.
"""
import gettext
import logging
import os

_domain = 'pymicrodvd'
_locale_dir = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'locales')
_translation : gettext.NullTranslations = gettext.NullTranslations()

def initialize_localization(language : str|None = None) -> None:
    """
    Install the translation catalog for a language, falling back to identity translation.
    """
    global _translation
    language = language or 'en'
    _translation = gettext.translation(_domain, localedir=_locale_dir, languages=[language], fallback=True)
    if type(_translation) is gettext.NullTranslations and language != 'en':
        logging.debug(f"No translation catalog for '{language}', using default messages")

def _(text : str) -> str:
    return _translation.gettext(text)
