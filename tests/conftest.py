import html
import importlib
import logging
import os
import sys
import types

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class _dict(dict):
    def __getattr__(self, key):
        return self.get(key)

    def __setattr__(self, key, value):
        self[key] = value


def _purge_wepos_modules():
    for name in list(sys.modules):
        if name == "wepos" or name.startswith("wepos."):
            sys.modules.pop(name, None)


@pytest.fixture
def frappe_env(monkeypatch, tmp_path):
    """
    Inject a stub ``frappe`` package and return ``(frappe, load)``.

    ``load(name)`` imports a ``wepos`` module bound to the stub. State the
    stub keeps (hooks, defaults, translations, records) lives on
    ``frappe.state`` so tests can seed it.
    """
    frappe = types.ModuleType("frappe")
    state = types.SimpleNamespace(
        hooks={},
        attrs={},
        defaults={},
        host_translations={},
        single_values={("Website Settings", "app_name"): "My Shop"},
        records={},
        meta_title_fields={},
        errors=[],
        throws=[],
        only_for=[],
        rendered=[],
        app_path=str(tmp_path / "apps" / "wepos"),
    )
    frappe.state = state

    class ValidationError(Exception):
        pass

    class PermissionError(Exception):
        pass

    class Redirect(Exception):
        pass

    frappe.ValidationError = ValidationError
    frappe.PermissionError = PermissionError
    frappe.Redirect = Redirect
    frappe._dict = _dict
    frappe._ = lambda msg: msg

    def whitelist(*args, **kwargs):
        def inner(fn):
            return fn
        return inner

    frappe.whitelist = whitelist

    def throw(msg, exc=ValidationError):
        state.throws.append(msg)
        raise exc(msg)

    frappe.throw = throw

    def only_for(roles):
        state.only_for.append(roles)

    frappe.only_for = only_for

    frappe.form_dict = _dict()
    frappe.conf = _dict()
    frappe.local = types.SimpleNamespace(flags=_dict(), lang="en", site="test.localhost")
    frappe.session = types.SimpleNamespace(
        user="cashier@example.com",
        data=_dict(csrf_token="token-123"),
    )

    frappe.get_hooks = lambda hook: list(state.hooks.get(hook, []))

    def get_attr(path):
        if path in state.attrs:
            return state.attrs[path]
        module_name, attr = path.rsplit(".", 1)
        return getattr(importlib.import_module(module_name), attr)

    frappe.get_attr = get_attr
    frappe.logger = lambda name=None: logging.getLogger(name or "frappe")
    frappe.log_error = lambda message=None, title=None: state.errors.append((message, title))

    def get_app_path(app, *parts):
        return "/".join([state.app_path, *parts])

    frappe.get_app_path = get_app_path

    def get_all(doctype, fields=None, **kwargs):
        return [_dict(record) for record in state.records.get(doctype, [])]

    frappe.get_all = get_all

    class Meta:
        def __init__(self, doctype):
            self.doctype = doctype

        def get_title_field(self):
            return state.meta_title_fields.get(self.doctype, "name")

    frappe.get_meta = Meta

    frappe.db = types.SimpleNamespace(
        get_single_value=lambda doctype, field: state.single_values.get((doctype, field)),
    )

    frappe.defaults = types.SimpleNamespace(
        get_global_default=lambda key: state.defaults.get(key),
        set_global_default=lambda key, value: state.defaults.__setitem__(key, value),
    )

    def render_template(template, context):
        state.rendered.append((template, context))
        return f"<html>{context.get('head_html')}{context.get('footer_scripts')}</html>"

    frappe.render_template = render_template

    utils = types.ModuleType("frappe.utils")
    utils.get_url = lambda path=None: "http://test.localhost"
    utils.escape_html = lambda text: html.escape(str(text), quote=True)
    frappe.utils = utils

    translate = types.ModuleType("frappe.translate")
    translate.get_all_translations = lambda lang: dict(state.host_translations.get(lang, {}))
    frappe.translate = translate

    website = types.ModuleType("frappe.website")
    website_utils = types.ModuleType("frappe.website.utils")

    def build_response(path, data, http_status_code, headers=None):
        return types.SimpleNamespace(path=path, data=data, status_code=http_status_code, headers=headers)

    website_utils.build_response = build_response
    page_renderers = types.ModuleType("frappe.website.page_renderers")
    base_renderer = types.ModuleType("frappe.website.page_renderers.base_renderer")

    class BaseRenderer:
        def __init__(self, path=None, http_status_code=None):
            self.headers = None
            self.http_status_code = http_status_code or 200
            self.path = (path or "").strip("/ ")

    base_renderer.BaseRenderer = BaseRenderer
    website.utils = website_utils
    website.page_renderers = page_renderers
    page_renderers.base_renderer = base_renderer

    monkeypatch.setitem(sys.modules, "frappe", frappe)
    monkeypatch.setitem(sys.modules, "frappe.utils", utils)
    monkeypatch.setitem(sys.modules, "frappe.translate", translate)
    monkeypatch.setitem(sys.modules, "frappe.website", website)
    monkeypatch.setitem(sys.modules, "frappe.website.utils", website_utils)
    monkeypatch.setitem(sys.modules, "frappe.website.page_renderers", page_renderers)
    monkeypatch.setitem(sys.modules, "frappe.website.page_renderers.base_renderer", base_renderer)

    _purge_wepos_modules()

    yield frappe, importlib.import_module

    _purge_wepos_modules()
