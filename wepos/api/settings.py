import json

import frappe
from frappe import _

from wepos.utils.settings import (
    get_option,
    get_settings_fields,
    get_settings_sections,
    set_option,
)


@frappe.whitelist()
def get_settings_schema():
    """Sections and fields for the admin settings screen."""
    return {
        "sections": get_settings_sections(),
        "fields": get_settings_fields(),
    }


@frappe.whitelist()
def get_settings():
    """
    Get current settings values grouped by section.

    Returns:
        dict: ``{section_id: {field_name: value}}``
    """
    values = {}
    for section, fields in get_settings_fields().items():
        values[section] = {
            name: get_option(name, section, field.get("default"))
            for name, field in fields.items()
        }
    return values


@frappe.whitelist(methods=["POST"])
def save_settings(settings):
    """
    Store settings values.

    Args:
        settings (dict|str): ``{section_id: {field_name: value}}``

    Returns:
        dict: Settings after saving
    """
    frappe.only_for("System Manager")

    if isinstance(settings, str):
        settings = json.loads(settings)

    schema = get_settings_fields()
    validate_settings(settings, schema)

    for section, values in settings.items():
        for name, value in values.items():
            set_option(name, section, value)

    frappe.logger("wepos").info(f"WePOS settings updated by {frappe.session.user}: {', '.join(settings)}")
    return get_settings()


def validate_settings(settings, schema):
    if not isinstance(settings, dict):
        frappe.throw(_("Settings must be grouped by section"), frappe.ValidationError)

    for section, values in settings.items():
        if section not in schema:
            frappe.throw(_("Unknown settings section: {0}").format(section), frappe.ValidationError)
        if not isinstance(values, dict):
            frappe.throw(_("Settings for section {0} must be a mapping").format(section), frappe.ValidationError)

        for name, value in values.items():
            field = schema[section].get(name)
            if not field:
                frappe.throw(_("Unknown setting {0} in section {1}").format(name, section), frappe.ValidationError)

            if field.get("type") in ("select", "text") and not isinstance(value, str):
                frappe.throw(
                    _("Invalid value for {0}: expected text").format(field.get("label") or name),
                    frappe.ValidationError,
                )

            if field.get("type") == "select" and value not in (field.get("options") or {}):
                frappe.throw(
                    _("Invalid value {0} for {1}").format(value, field.get("label") or name),
                    frappe.ValidationError,
                )
