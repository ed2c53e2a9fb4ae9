"""
Script and stylesheet registry for the POS page.

Each POS render gets its own ``AssetRegistry``. It starts out holding the
website's global includes, is cleared, and is then filled by the
``wepos_enqueue_scripts`` subscribers before its tags are printed.
"""

import json
import os
import frappe
from frappe.utils import escape_html

POS_BUNDLE_ENTRY = "src/main.js"


class Asset:
    __slots__ = ("handle", "src", "deps", "version")

    def __init__(self, handle, src, deps=None, version=None):
        self.handle = handle
        self.src = src
        self.deps = list(deps or [])
        self.version = version

    @property
    def url(self):
        if not self.version:
            return self.src
        separator = "&" if "?" in self.src else "?"
        return f"{self.src}{separator}ver={self.version}"


class AssetGroup:
    """Registered assets of one kind plus the queue of handles to print."""

    def __init__(self):
        self.registered = {}
        self.queue = []

    def register(self, handle, src, deps=None, version=None):
        if handle in self.registered:
            return False
        self.registered[handle] = Asset(handle, src, deps, version)
        return True

    def enqueue(self, handle, src=None, deps=None, version=None):
        if src:
            self.register(handle, src, deps, version)
        if handle not in self.queue:
            self.queue.append(handle)

    def reset(self):
        self.registered = {}
        self.queue = []

    def resolve(self):
        """
        Return queued assets in print order, dependencies first.

        Assets that depend on an unregistered handle are left out.
        """
        done = []
        skipped = set()

        def visit(handle, trail):
            if handle in done or handle in skipped:
                return handle in done
            asset = self.registered.get(handle)
            if asset is None or handle in trail:
                skipped.add(handle)
                return False
            for dep in asset.deps:
                if not visit(dep, trail | {handle}):
                    skipped.add(handle)
                    return False
            done.append(handle)
            return True

        for handle in self.queue:
            if not visit(handle, frozenset()):
                frappe.logger("wepos").warning(f"Asset '{handle}' not printed: missing or circular dependency")

        return [self.registered[handle] for handle in done]


class AssetRegistry:
    """Scripts and styles to print on one page render."""

    def __init__(self):
        self.styles = AssetGroup()
        self.scripts = AssetGroup()

    @classmethod
    def from_website_includes(cls):
        """Registry holding the ``web_include_css``/``web_include_js`` of all apps."""
        registry = cls()
        for i, src in enumerate(frappe.get_hooks("web_include_css") or []):
            registry.enqueue_style(f"web-include-css-{i}", src)
        for i, src in enumerate(frappe.get_hooks("web_include_js") or []):
            registry.enqueue_script(f"web-include-js-{i}", src)
        return registry

    def register_style(self, handle, src, deps=None, version=None):
        return self.styles.register(handle, src, deps, version)

    def enqueue_style(self, handle, src=None, deps=None, version=None):
        self.styles.enqueue(handle, src, deps, version)

    def register_script(self, handle, src, deps=None, version=None):
        return self.scripts.register(handle, src, deps, version)

    def enqueue_script(self, handle, src=None, deps=None, version=None):
        self.scripts.enqueue(handle, src, deps, version)

    def reset_styles(self):
        self.styles.reset()

    def reset_scripts(self):
        self.scripts.reset()

    def print_styles(self):
        return "\n".join(
            f'<link rel="stylesheet" id="{escape_html(asset.handle)}-css" href="{escape_html(asset.url)}" type="text/css">'
            for asset in self.styles.resolve()
        )

    def print_scripts(self):
        return "\n".join(
            f'<script id="{escape_html(asset.handle)}-js" src="{escape_html(asset.url)}"></script>'
            for asset in self.scripts.resolve()
        )


def get_pos_bundle_urls():
    """
    Load the POS bundle URLs from the Vite manifest.

    Returns:
        dict: ``js`` URL and list of ``css`` URLs
    """
    base_url = "/assets/wepos/dist"
    manifest_path = os.path.join(frappe.get_app_path("wepos"), "public", "dist", ".vite", "manifest.json")

    if not os.path.exists(manifest_path):
        frappe.logger("wepos").warning(f"POS bundle manifest not found at {manifest_path}, using default bundle")
        return get_fallback_urls()

    try:
        with open(manifest_path, "r") as f:
            manifest = json.load(f)
    except (OSError, ValueError) as e:
        frappe.log_error(f"Error loading POS bundle manifest: {str(e)}", "WePOS Assets")
        return get_fallback_urls()

    entry = manifest.get(POS_BUNDLE_ENTRY)
    if not entry:
        frappe.log_error(f"Entry point '{POS_BUNDLE_ENTRY}' not found in POS bundle manifest", "WePOS Assets")
        return get_fallback_urls()

    return {
        "js": f"{base_url}/{entry['file']}",
        "css": [f"{base_url}/{css}" for css in entry.get("css") or []],
    }


def get_fallback_urls():
    return {
        "js": "/assets/wepos/js/wepos.js",
        "css": ["/assets/wepos/css/wepos.css"],
    }


def enqueue_pos_assets(registry):
    """Default ``wepos_enqueue_scripts`` subscriber: the POS application bundle."""
    from wepos import __version__

    urls = get_pos_bundle_urls()

    for i, src in enumerate(urls["css"]):
        handle = "wepos-style" if i == 0 else f"wepos-style-{i}"
        registry.enqueue_style(handle, src, version=__version__)

    registry.enqueue_script("wepos-app", urls["js"], version=__version__)
