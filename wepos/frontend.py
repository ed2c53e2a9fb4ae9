"""
POS frontend page.

Requests carrying ``?wcpos=true`` (or hitting the POS route) are answered with
the standalone POS application shell instead of the regular website page.
The shell only carries the assets registered by ``wepos_enqueue_scripts``
subscribers; the website theme's includes are dropped.
"""

import json

import frappe
from frappe import _
from frappe.utils import get_url
from frappe.website.page_renderers.base_renderer import BaseRenderer
from frappe.website.utils import build_response

from wepos.utils.assets import AssetRegistry
from wepos.utils.filters import do_action
from wepos.utils.settings import get_option
from wepos.utils.translations import get_jed_locale_data

POS_TEMPLATE = "wepos/templates/wepos.html"
DEFAULT_POS_ROUTE = "pos"
DEFAULT_ACCOUNT_URL = "/me"


def is_pos_request():
    return str(frappe.form_dict.get("wcpos")) == "true"


def get_pos_route():
    return (frappe.conf.get("wepos_route") or DEFAULT_POS_ROUTE).strip("/")


def get_account_url():
    return frappe.conf.get("wepos_account_url") or DEFAULT_ACCOUNT_URL


def show_admin_bar():
    return not is_pos_request()


def update_website_context(context):
    """Hide the admin bar and website chrome on POS pages."""
    if show_admin_bar():
        return

    context.show_admin_bar = False
    context.no_header = 1
    context.no_breadcrumbs = 1
    context.show_sidebar = False


def isolate_assets(registry):
    """
    Replace whatever ``registry`` holds with the POS assets.

    Runs reset styles, reset scripts, the ``wepos_enqueue_scripts`` action and
    finally prints the styles, in that order.

    Returns:
        str: Stylesheet tags for the page head ("" on non-POS requests)
    """
    if not is_pos_request():
        return ""

    registry.reset_styles()
    registry.reset_scripts()
    do_action("wepos_enqueue_scripts", registry)
    return registry.print_styles()


def get_boot_data():
    """Data handed to the POS client as ``window.wepos``."""
    return {
        "site_url": get_url(),
        "csrf_token": frappe.session.data.csrf_token,
        "user": frappe.session.user,
        "enable_fee_tax": get_option("enable_fee_tax", "wepos_general"),
        "receipt_header": get_option("receipt_header", "wepos_receipts"),
        "receipt_footer": get_option("receipt_footer", "wepos_receipts"),
        "locale_data": get_jed_locale_data("wepos"),
    }


class POSPageRenderer(BaseRenderer):
    """Renders the POS shell ahead of every other website renderer."""

    def can_render(self):
        if self.path == get_pos_route():
            frappe.form_dict.wcpos = "true"

        return is_pos_request()

    def render(self):
        if frappe.session.user == "Guest":
            frappe.local.flags.redirect_location = get_account_url()
            raise frappe.Redirect

        html = frappe.render_template(POS_TEMPLATE, self.get_context())
        return build_response(self.path, html, self.http_status_code or 200, self.headers)

    def get_context(self):
        registry = AssetRegistry.from_website_includes()
        head_html = isolate_assets(registry)

        context = frappe._dict(
            title=_("Point of Sale"),
            lang=frappe.local.lang,
            head_html=head_html,
            footer_scripts=registry.print_scripts(),
            boot=json.dumps(get_boot_data()).replace("</", "<\\/"),
        )
        update_website_context(context)
        return context
