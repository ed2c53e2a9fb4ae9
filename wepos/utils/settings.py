"""
Settings schema for the WePOS admin screen.

The schema only declares sections and fields. Other apps extend it through
the ``wepos_settings_sections`` and ``wepos_settings_fields`` hooks.
Stored values live in Frappe's global defaults as ``"<section>:<name>"``.
"""

import frappe
from frappe import _

from wepos.utils.filters import apply_filters


def get_doctype_options(doctype):
    """
    Get select options for all records of a doctype.

    Args:
        doctype (str): DocType to list

    Returns:
        dict: ``{"-1": "- select -", name: title, ...}``
    """
    options = {"-1": _("- select -")}

    meta_title_field = frappe.get_meta(doctype).get_title_field()
    fields = ["name"] if meta_title_field == "name" else ["name", meta_title_field]

    for record in frappe.get_all(doctype, fields=fields, limit_page_length=0):
        options[record.name] = record.get(meta_title_field) or record.name

    return options


def get_settings_sections():
    sections = [
        {
            "id": "wepos_general",
            "title": _("General"),
            "icon": "dashicons-admin-generic",
        },
        {
            "id": "wepos_receipts",
            "title": _("Receipts"),
            "icon": "dashicons-media-text",
        },
    ]

    return apply_filters("wepos_settings_sections", sections)


def get_default_receipt_header():
    return frappe.db.get_single_value("Website Settings", "app_name") or frappe.local.site


def get_settings_fields():
    settings_fields = {
        "wepos_general": {
            "enable_fee_tax": {
                "name": "enable_fee_tax",
                "label": _("Calculate tax for Fee"),
                "desc": _("Choose whether tax is calculated for fees in the POS cart and checkout"),
                "type": "select",
                "default": "yes",
                "options": {
                    "yes": _("Yes"),
                    "no": _("No"),
                },
            },
        },
        "wepos_receipts": {
            "receipt_header": {
                "name": "receipt_header",
                "label": _("Order receipt header"),
                "desc": _("Enter your order receipt header"),
                "type": "text",
                "default": get_default_receipt_header(),
            },
            "receipt_footer": {
                "name": "receipt_footer",
                "label": _("Order receipt footer"),
                "desc": _("Enter your order receipt footer text"),
                "type": "text",
                "default": _("Thank you"),
            },
        },
    }

    return apply_filters("wepos_settings_fields", settings_fields)


def get_option_key(name, section):
    return f"{section}:{name}"


def get_option(name, section, default=None):
    """
    Get a stored setting value.

    Falls back to ``default``, then to the field's schema default.
    """
    value = frappe.defaults.get_global_default(get_option_key(name, section))
    if value is not None:
        return value

    if default is not None:
        return default

    field = get_settings_fields().get(section, {}).get(name)
    return field.get("default") if field else None


def set_option(name, section, value):
    frappe.defaults.set_global_default(get_option_key(name, section), value)
