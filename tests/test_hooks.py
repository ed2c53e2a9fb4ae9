def test_hooks_point_at_existing_callables(frappe_env):
    frappe, load = frappe_env
    hooks = load("wepos.hooks")

    for path in hooks.page_renderer + hooks.update_website_context + hooks.wepos_enqueue_scripts:
        assert callable(frappe.get_attr(path))

    assert hooks.app_name == "wepos"
