"""Hierarchical sorting of taxonomy terms (product categories)."""

from collections.abc import Mapping

import frappe


def _get(term, field):
    if isinstance(term, Mapping):
        return term.get(field)
    return getattr(term, field, None)


def _set_children(term, children):
    if isinstance(term, Mapping):
        term["children"] = children
    else:
        term.children = children


def sort_terms_hierarchically(terms, into=None, parent_id=0, id_field="term_id", parent_field="parent"):
    """
    Recursively sort a flat list of terms into a tree.

    Terms whose parent is ``parent_id`` are moved out of ``terms`` into
    ``into``; each of them then gets a ``children`` list filled the same way
    from what is left. ``terms`` is consumed in place, so a term can only
    ever be placed under one parent. Terms whose parent is never reached
    (orphans, cycles) are not placed and stay behind in ``terms``.
    A term sharing its id with an earlier sibling replaces it in place.

    Args:
        terms (list): Flat list of terms (dicts or objects)
        into (list): Result list to append root terms to
        parent_id: Parent id of the roots to collect
        id_field (str): Field holding a term's id
        parent_field (str): Field holding a term's parent id

    Returns:
        list: ``into``, holding the roots with nested ``children``

    Example:
        >>> terms = [{"term_id": 1, "parent": 0}, {"term_id": 2, "parent": 1}]
        >>> sort_terms_hierarchically(terms)
        [{'term_id': 1, 'parent': 0, 'children': [{'term_id': 2, 'parent': 1, 'children': []}]}]
    """
    if into is None:
        into = []

    positions = {_get(term, id_field): i for i, term in enumerate(into)}
    remaining = []
    for term in terms:
        if _get(term, parent_field) == parent_id:
            term_id = _get(term, id_field)
            if term_id in positions:
                into[positions[term_id]] = term
            else:
                positions[term_id] = len(into)
                into.append(term)
        else:
            remaining.append(term)
    terms[:] = remaining

    for term in into:
        children = []
        _set_children(term, children)
        sort_terms_hierarchically(terms, children, _get(term, id_field), id_field, parent_field)

    return into


def get_product_category():
    """
    Get ERPNext item groups as a category tree.

    Returns:
        list: Root item groups, each with nested ``children``
    """
    groups = frappe.get_all(
        "Item Group",
        fields=["name", "item_group_name", "parent_item_group", "is_group", "image"],
        order_by="lft asc",
    )

    terms = [
        frappe._dict(
            term_id=group.name,
            parent=group.parent_item_group or "",
            name=group.item_group_name or group.name,
            is_group=group.is_group,
            image=group.image,
        )
        for group in groups
    ]

    category_hierarchy = sort_terms_hierarchically(terms, parent_id="")

    if terms:
        frappe.logger("wepos").debug(
            f"Skipped {len(terms)} item group(s) with unreachable parents: "
            f"{', '.join(str(t.term_id) for t in terms)}"
        )

    return category_hierarchy
