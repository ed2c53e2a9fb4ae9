"""
Translation bundles for the POS client.

The POS client uses a Jed-style i18n runtime, so translations are shipped to
it as ``{"domain": ..., "locale_data": {domain: {"": header, msgid: [...]}}}``.
Entries come from two places: the catalog compiled into the app's
``languages`` folder and the translations Frappe itself serves for the
active language. The latter win on collision.
"""

import os
import struct

import frappe
from babel.core import UnknownLocaleError
from babel.messages.mofile import read_mo
from babel.messages.plurals import get_plural


def get_current_lang():
    return frappe.local.lang or "en"


def get_languages_dir():
    return frappe.conf.get("wepos_languages_dir") or frappe.get_app_path("wepos", "languages")


def get_translations_for_plugin_domain(domain, language_dir=None):
    """
    Load the app-shipped catalog ``<language_dir>/<domain>-<lang>.mo``.

    A missing catalog yields no translations. A catalog that exists but
    cannot be parsed is recorded in the Error Log and treated as missing.

    Args:
        domain (str): Translation domain
        language_dir (str): Folder holding compiled catalogs

    Returns:
        dict: ``header`` (dict of catalog headers, or ``""`` when nothing was
        loaded) and ``translations`` (msgid -> list of translated strings)
    """
    if language_dir is None:
        language_dir = get_languages_dir()

    mo_file = os.path.join(language_dir, f"{domain}-{get_current_lang()}.mo")
    if not os.path.isfile(mo_file):
        return {"header": "", "translations": {}}

    try:
        with open(mo_file, "rb") as f:
            catalog = read_mo(f)
    except (OSError, ValueError, struct.error) as e:
        frappe.log_error(f"Could not read translation catalog {mo_file}: {str(e)}", "WePOS Translations")
        return {"header": "", "translations": {}}

    header = dict(catalog.mime_headers)
    header.setdefault("Plural-Forms", catalog.plural_forms)

    translations = {}
    for message in catalog:
        if not message.id:
            continue
        msgid = message.id[0] if isinstance(message.id, (list, tuple)) else message.id
        if isinstance(message.string, (list, tuple)):
            translations[msgid] = list(message.string)
        else:
            translations[msgid] = [message.string]

    return {"header": header, "translations": translations}


def get_host_translations(lang):
    """
    Translations Frappe serves for ``lang``, in the same shape as the
    app-shipped catalog.
    """
    from frappe.translate import get_all_translations

    header = {}
    try:
        header["Plural-Forms"] = get_plural(lang.replace("-", "_")).plural_forms
    except (ValueError, UnknownLocaleError):
        pass

    entries = get_all_translations(lang) or {}
    return {
        "header": header,
        "translations": {msgid: [message] for msgid, message in entries.items() if msgid},
    }


def get_jed_locale_data(domain, language_dir=None):
    """
    Returns Jed-formatted localization data.

    Args:
        domain (str): Translation domain
        language_dir (str): Folder holding the app-shipped catalogs

    Returns:
        dict: Locale bundle ready to be serialised for the client
    """
    lang = get_current_lang()
    plugin_translations = get_translations_for_plugin_domain(domain, language_dir)
    translations = get_host_translations(lang)

    locale = {
        "domain": domain,
        "locale_data": {
            domain: {
                "": {
                    "domain": domain,
                    "lang": lang,
                },
            },
        },
    }

    if translations["header"].get("Plural-Forms"):
        locale["locale_data"][domain][""]["plural_forms"] = translations["header"]["Plural-Forms"]
    elif plugin_translations["header"]:
        locale["locale_data"][domain][""]["plural_forms"] = plugin_translations["header"]["Plural-Forms"]

    entries = {**plugin_translations["translations"], **translations["translations"]}
    for msgid, entry in entries.items():
        locale["locale_data"][domain][msgid] = entry

    return locale
