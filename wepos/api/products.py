import frappe

from wepos.utils.terms import get_product_category
from wepos.utils.translations import get_jed_locale_data


@frappe.whitelist()
def get_product_categories():
    """Item groups as a tree for the POS category filter."""
    return get_product_category()


@frappe.whitelist()
def get_locale_data(domain="wepos"):
    """Jed locale bundle for ``domain`` in the current language."""
    return get_jed_locale_data(domain)
