"""
Extension points for WePOS.

Collaborating apps subscribe by listing dotted paths under a hook name in
their own ``hooks.py``::

    wepos_settings_fields = ["my_app.pos.add_loyalty_fields"]

Subscribers are collected with ``frappe.get_hooks`` in app install order,
followed by any callables passed explicitly by the caller.
"""

import frappe


def get_callbacks(hook, callbacks=None):
    """Return the callables subscribed to ``hook``."""
    resolved = [frappe.get_attr(path) for path in frappe.get_hooks(hook) or []]
    resolved.extend(callbacks or [])
    return resolved


def apply_filters(hook, value, *args, callbacks=None):
    """
    Pass ``value`` through every subscriber of ``hook``.

    Each subscriber receives the current value (plus ``args``) and returns the
    transformed value. Subscribers that mutate in place and return ``None``
    keep the current value.

    Args:
        hook (str): Hook name declared in ``hooks.py``
        value: Value to transform
        callbacks (list): Extra callables run after the hook subscribers

    Returns:
        The transformed value
    """
    for callback in get_callbacks(hook, callbacks):
        result = callback(value, *args)
        if result is not None:
            value = result
    return value


def do_action(hook, *args, callbacks=None):
    """Call every subscriber of ``hook`` with ``args``, ignoring results."""
    for callback in get_callbacks(hook, callbacks):
        callback(*args)
